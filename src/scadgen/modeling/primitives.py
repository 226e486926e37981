from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from scadgen.modeling.node import Arguments, Primitive, resolution_arguments
from scadgen.validation import (
    InvalidParameter,
    optional_count,
    optional_positive,
    require_count,
    require_indices,
    require_non_negative,
    require_points,
    require_vector,
)


def _size3(size: Sequence[float] | float) -> tuple[float, float, float]:
    if isinstance(size, (int, float)):
        size = (size, size, size)
    vec = require_vector(size, "size")
    for axis, value in zip("xyz", vec):
        require_non_negative(value, f"size.{axis}")
    return vec


@dataclass(frozen=True)
class Cube(Primitive):
    scad_name = "cube"

    size: tuple[float, float, float]
    center: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", _size3(self.size))
        object.__setattr__(self, "center", bool(self.center))

    def arguments(self) -> Arguments:
        return (("size", self.size), ("center", self.center))


@dataclass(frozen=True)
class Cylinder(Primitive):
    """Right circular cylinder or frustum along +Z."""

    scad_name = "cylinder"

    height: float
    r1: float
    r2: float
    center: bool = False
    segments: int | None = None
    fa: float | None = None
    fs: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "height", require_non_negative(self.height, "height"))
        object.__setattr__(self, "r1", require_non_negative(self.r1, "r1"))
        object.__setattr__(self, "r2", require_non_negative(self.r2, "r2"))
        if self.r1 <= 0 and self.r2 <= 0:
            raise InvalidParameter("At least one of r1 or r2 must be > 0.")
        object.__setattr__(self, "center", bool(self.center))
        object.__setattr__(self, "segments", optional_count(self.segments, "segments"))
        object.__setattr__(self, "fa", optional_positive(self.fa, "fa"))
        object.__setattr__(self, "fs", optional_positive(self.fs, "fs"))

    def arguments(self) -> Arguments:
        if self.r1 == self.r2:
            radii = (("r", self.r1),)
        else:
            radii = (("r1", self.r1), ("r2", self.r2))
        return (
            (("h", self.height),)
            + radii
            + (("center", self.center),)
            + resolution_arguments(self.segments, self.fa, self.fs)
        )


@dataclass(frozen=True)
class Sphere(Primitive):
    scad_name = "sphere"

    radius: float
    segments: int | None = None
    fa: float | None = None
    fs: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", require_non_negative(self.radius, "radius"))
        object.__setattr__(self, "segments", optional_count(self.segments, "segments"))
        object.__setattr__(self, "fa", optional_positive(self.fa, "fa"))
        object.__setattr__(self, "fs", optional_positive(self.fs, "fs"))

    def arguments(self) -> Arguments:
        return (("r", self.radius),) + resolution_arguments(self.segments, self.fa, self.fs)


@dataclass(frozen=True)
class Polyhedron(Primitive):
    scad_name = "polyhedron"

    points: tuple[tuple[float, float, float], ...]
    faces: tuple[tuple[int, ...], ...]
    convexity: int = 1

    def __post_init__(self) -> None:
        points = require_points(self.points, "points", dims=3, minimum=4)
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "faces", require_indices(self.faces, "faces", len(points), minimum=3))
        object.__setattr__(self, "convexity", require_count(self.convexity, "convexity", minimum=1))

    def arguments(self) -> Arguments:
        return (("points", self.points), ("faces", self.faces), ("convexity", self.convexity))


def make_cube(size: Sequence[float] | float = (1.0, 1.0, 1.0), center: bool = False) -> Cube:
    """Axis-aligned box with edge lengths ``size``; corner at the origin unless ``center``."""

    return Cube(size=size, center=center)


def make_cylinder(
    height: float = 1.0,
    radius: float | None = None,
    *,
    r1: float | None = None,
    r2: float | None = None,
    center: bool = False,
    segments: int | None = None,
    fa: float | None = None,
    fs: float | None = None,
) -> Cylinder:
    """Cylinder of ``height`` along +Z. Pass ``radius``, or ``r1``/``r2`` for a frustum."""

    if radius is not None and (r1 is not None or r2 is not None):
        raise InvalidParameter("Provide radius or r1/r2, not both.")
    if radius is None:
        if r1 is None and r2 is None:
            radius = 0.5
        else:
            r1 = r2 if r1 is None else r1
            r2 = r1 if r2 is None else r2
    if radius is not None:
        r1 = r2 = radius
    return Cylinder(height=height, r1=r1, r2=r2, center=center, segments=segments, fa=fa, fs=fs)


def make_cone(
    bottom_diameter: float = 1.0,
    top_diameter: float = 0.0,
    height: float = 1.0,
    center: bool = False,
    segments: int | None = None,
) -> Cylinder:
    """Circular frustum. Set top_diameter=0 for a classic cone."""

    bottom = require_non_negative(bottom_diameter, "bottom_diameter")
    top = require_non_negative(top_diameter, "top_diameter")
    if bottom <= 0 and top <= 0:
        raise InvalidParameter("At least one of bottom_diameter or top_diameter must be > 0.")
    return Cylinder(height=height, r1=bottom / 2.0, r2=top / 2.0, center=center, segments=segments)


def make_sphere(
    radius: float = 0.5,
    segments: int | None = None,
    fa: float | None = None,
    fs: float | None = None,
) -> Sphere:
    return Sphere(radius=radius, segments=segments, fa=fa, fs=fs)


def make_polyhedron(
    points: Iterable[Sequence[float]],
    faces: Iterable[Sequence[int]],
    convexity: int = 1,
) -> Polyhedron:
    """Closed solid from explicit vertices and faces (indices into ``points``)."""

    return Polyhedron(points=tuple(points), faces=tuple(faces), convexity=convexity)

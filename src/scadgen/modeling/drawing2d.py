from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from scadgen.modeling.node import Arguments, Primitive, resolution_arguments
from scadgen.validation import (
    optional_count,
    optional_positive,
    require_count,
    require_indices,
    require_non_negative,
    require_points,
    require_vector,
)


@dataclass(frozen=True)
class Square(Primitive):
    scad_name = "square"
    solid = False

    size: tuple[float, float]
    center: bool = False

    def __post_init__(self) -> None:
        size = self.size
        if isinstance(size, (int, float)):
            size = (size, size)
        size = require_vector(size, "size", size=2)
        for axis, value in zip("xy", size):
            require_non_negative(value, f"size.{axis}")
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "center", bool(self.center))

    def arguments(self) -> Arguments:
        return (("size", self.size), ("center", self.center))


@dataclass(frozen=True)
class Circle(Primitive):
    scad_name = "circle"
    solid = False

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
class Polygon(Primitive):
    """Planar polygon; ``paths`` selects outer loop and holes by index."""

    scad_name = "polygon"
    solid = False

    points: tuple[tuple[float, float], ...]
    paths: tuple[tuple[int, ...], ...] | None = None
    convexity: int = 1

    def __post_init__(self) -> None:
        points = require_points(self.points, "points", dims=2, minimum=3)
        object.__setattr__(self, "points", points)
        if self.paths is not None:
            object.__setattr__(self, "paths", require_indices(self.paths, "paths", len(points), minimum=3))
        object.__setattr__(self, "convexity", require_count(self.convexity, "convexity", minimum=1))

    def arguments(self) -> Arguments:
        args: list = [("points", self.points)]
        if self.paths is not None:
            args.append(("paths", self.paths))
        args.append(("convexity", self.convexity))
        return tuple(args)


def make_square(size: Sequence[float] | float = (1.0, 1.0), center: bool = False) -> Square:
    return Square(size=size, center=center)


def make_rect(size: Sequence[float] = (1.0, 1.0), center: bool = True) -> Square:
    """Centered rectangle; shorthand for ``make_square(size, center=True)``."""

    return Square(size=size, center=center)


def make_circle(
    radius: float = 0.5,
    segments: int | None = None,
    fa: float | None = None,
    fs: float | None = None,
) -> Circle:
    return Circle(radius=radius, segments=segments, fa=fa, fs=fs)


def make_polygon(
    points: Iterable[Sequence[float]],
    paths: Iterable[Sequence[int]] | None = None,
    convexity: int = 1,
) -> Polygon:
    return Polygon(
        points=tuple(points),
        paths=None if paths is None else tuple(paths),
        convexity=convexity,
    )

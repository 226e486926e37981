from __future__ import annotations

from dataclasses import dataclass

from scadgen.modeling.node import Arguments, Node, Transform, resolution_arguments
from scadgen.validation import (
    InvalidParameter,
    optional_count,
    optional_positive,
    require_count,
    require_finite,
    require_non_negative,
    require_positive,
    require_vector,
)


def _require_profile(node: Node, op: str) -> None:
    if not isinstance(node, Node):
        raise InvalidParameter(f"{op} expects a Node profile, got {type(node).__name__}.")
    if node.dimensions != 2:
        raise InvalidParameter(f"{op} requires a 2D profile (square, circle, polygon, ...).")


@dataclass(frozen=True)
class LinearExtrude(Transform):
    scad_name = "linear_extrude"

    height: float = 1.0
    center: bool = False
    convexity: int = 10
    twist: float = 0.0
    slices: int | None = None
    top_scale: tuple[float, float] = (1.0, 1.0)

    def __post_init__(self) -> None:
        _require_profile(self.child, "linear_extrude")
        object.__setattr__(self, "height", require_positive(self.height, "height"))
        object.__setattr__(self, "center", bool(self.center))
        object.__setattr__(self, "convexity", require_count(self.convexity, "convexity", minimum=1))
        object.__setattr__(self, "twist", require_finite(self.twist, "twist"))
        object.__setattr__(self, "slices", optional_count(self.slices, "slices", minimum=1))
        top_scale = self.top_scale
        if isinstance(top_scale, (int, float)):
            top_scale = (top_scale, top_scale)
        top_scale = require_vector(top_scale, "scale", size=2)
        for value in top_scale:
            require_non_negative(value, "scale")
        object.__setattr__(self, "top_scale", top_scale)

    @property
    def dimensions(self) -> int:
        return 3

    def arguments(self) -> Arguments:
        args: list = [
            ("height", self.height),
            ("center", self.center),
            ("convexity", self.convexity),
            ("twist", self.twist),
        ]
        if self.slices is not None:
            args.append(("slices", self.slices))
        sx, sy = self.top_scale
        args.append(("scale", sx if sx == sy else self.top_scale))
        return tuple(args)


@dataclass(frozen=True)
class RotateExtrude(Transform):
    """Sweep a profile in the X+ half plane around the Z axis."""

    scad_name = "rotate_extrude"

    angle: float = 360.0
    convexity: int = 10
    segments: int | None = None
    fa: float | None = None
    fs: float | None = None

    def __post_init__(self) -> None:
        _require_profile(self.child, "rotate_extrude")
        angle = require_finite(self.angle, "angle")
        if angle == 0 or abs(angle) > 360:
            raise InvalidParameter("angle must be non-zero and within [-360, 360].")
        object.__setattr__(self, "angle", angle)
        object.__setattr__(self, "convexity", require_count(self.convexity, "convexity", minimum=1))
        object.__setattr__(self, "segments", optional_count(self.segments, "segments"))
        object.__setattr__(self, "fa", optional_positive(self.fa, "fa"))
        object.__setattr__(self, "fs", optional_positive(self.fs, "fs"))

    @property
    def dimensions(self) -> int:
        return 3

    def arguments(self) -> Arguments:
        return (
            ("angle", self.angle),
            ("convexity", self.convexity),
        ) + resolution_arguments(self.segments, self.fa, self.fs)


def linear_extrude(
    profile: Node,
    height: float = 1.0,
    center: bool = False,
    convexity: int = 10,
    twist: float = 0.0,
    slices: int | None = None,
    scale: float | tuple[float, float] = 1.0,
) -> LinearExtrude:
    """Extrude a 2D profile along +Z, optionally twisting and scaling towards the top."""

    return LinearExtrude(
        child=profile,
        height=height,
        center=center,
        convexity=convexity,
        twist=twist,
        slices=slices,
        top_scale=scale,
    )


def rotate_extrude(
    profile: Node,
    angle: float = 360.0,
    convexity: int = 10,
    segments: int | None = None,
    fa: float | None = None,
    fs: float | None = None,
) -> RotateExtrude:
    return RotateExtrude(child=profile, angle=angle, convexity=convexity, segments=segments, fa=fa, fs=fs)

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from scadgen.modeling._color import ColorInput, normalize_alpha, normalize_color
from scadgen.modeling.node import Arguments, Node, Transform
from scadgen.validation import (
    InvalidParameter,
    require_finite,
    require_non_negative,
    require_nonzero_vector,
    require_vector,
)


def _translation_matrix(offset: Sequence[float]) -> np.ndarray:
    dx, dy, dz = np.asarray(offset, dtype=float).reshape(3)
    mat = np.eye(4)
    mat[:3, 3] = [dx, dy, dz]
    return mat


def _axis_rotation_matrix(axis: Sequence[float], angle_deg: float) -> np.ndarray:
    axis_vec = np.asarray(axis, dtype=float).reshape(3)
    axis_vec = axis_vec / np.linalg.norm(axis_vec)
    angle_rad = np.deg2rad(angle_deg)
    x, y, z = axis_vec
    c = np.cos(angle_rad)
    s = np.sin(angle_rad)
    C = 1.0 - c
    return np.array(
        [
            [x * x * C + c, x * y * C - z * s, x * z * C + y * s, 0.0],
            [y * x * C + z * s, y * y * C + c, y * z * C - x * s, 0.0],
            [z * x * C - y * s, z * y * C + x * s, z * z * C + c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=float,
    )


def _rotation_euler_matrix(angles_deg: Sequence[float]) -> np.ndarray:
    # OpenSCAD applies X, then Y, then Z.
    ax, ay, az = np.asarray(angles_deg, dtype=float).reshape(3)
    rx = _axis_rotation_matrix((1.0, 0.0, 0.0), ax)
    ry = _axis_rotation_matrix((0.0, 1.0, 0.0), ay)
    rz = _axis_rotation_matrix((0.0, 0.0, 1.0), az)
    return rz @ ry @ rx


def _scale_matrix(factors: Sequence[float]) -> np.ndarray:
    sx, sy, sz = np.asarray(factors, dtype=float).reshape(3)
    mat = np.eye(4)
    mat[0, 0] = sx
    mat[1, 1] = sy
    mat[2, 2] = sz
    return mat


def _mirror_matrix(normal: Sequence[float]) -> np.ndarray:
    axis_vec = np.asarray(normal, dtype=float).reshape(3)
    axis_vec = axis_vec / np.linalg.norm(axis_vec)
    mat = np.eye(4)
    mat[:3, :3] -= 2.0 * np.outer(axis_vec, axis_vec)
    return mat


@dataclass(frozen=True)
class Translate(Transform):
    scad_name = "translate"

    offset: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "offset", require_vector(self.offset, "offset"))

    def arguments(self) -> Arguments:
        return (("v", self.offset),)

    def matrix(self) -> np.ndarray:
        return _translation_matrix(self.offset)


@dataclass(frozen=True)
class Rotate(Transform):
    """Euler rotation in degrees about X, then Y, then Z."""

    scad_name = "rotate"

    angles: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "angles", require_vector(self.angles, "angles"))

    def arguments(self) -> Arguments:
        return (("a", self.angles),)

    def matrix(self) -> np.ndarray:
        return _rotation_euler_matrix(self.angles)


@dataclass(frozen=True)
class AxisRotate(Transform):
    scad_name = "rotate"

    angle: float = 0.0
    axis: Tuple[float, float, float] = (0.0, 0.0, 1.0)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "angle", require_finite(self.angle, "angle"))
        object.__setattr__(self, "axis", require_nonzero_vector(self.axis, "Rotation axis"))

    def arguments(self) -> Arguments:
        return (("a", self.angle), ("v", self.axis))

    def matrix(self) -> np.ndarray:
        return _axis_rotation_matrix(self.axis, self.angle)


@dataclass(frozen=True)
class Mirror(Transform):
    """Reflect across the plane through the origin with the given normal."""

    scad_name = "mirror"

    normal: Tuple[float, float, float] = (1.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "normal", require_nonzero_vector(self.normal, "Mirror normal"))

    def arguments(self) -> Arguments:
        return (("v", self.normal),)

    def matrix(self) -> np.ndarray:
        return _mirror_matrix(self.normal)


@dataclass(frozen=True)
class Scale(Transform):
    scad_name = "scale"

    factors: Tuple[float, float, float] = (1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "factors", require_vector(self.factors, "factors"))

    def arguments(self) -> Arguments:
        return (("v", self.factors),)

    def matrix(self) -> np.ndarray:
        return _scale_matrix(self.factors)


@dataclass(frozen=True)
class Resize(Transform):
    """Scale to absolute dimensions; zero entries keep that axis (or follow ``auto``)."""

    scad_name = "resize"

    size: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    auto: Tuple[bool, bool, bool] = (False, False, False)

    def __post_init__(self) -> None:
        super().__post_init__()
        size = require_vector(self.size, "size")
        for axis, value in zip("xyz", size):
            require_non_negative(value, f"size.{axis}")
        object.__setattr__(self, "size", size)
        auto = self.auto
        if isinstance(auto, bool):
            auto = (auto, auto, auto)
        auto = tuple(bool(flag) for flag in auto)
        if len(auto) != 3:
            raise InvalidParameter("auto must be a bool or three bools.")
        object.__setattr__(self, "auto", auto)

    def arguments(self) -> Arguments:
        return (("newsize", self.size), ("auto", self.auto))


@dataclass(frozen=True)
class MultMatrix(Transform):
    scad_name = "multmatrix"

    rows: Tuple[Tuple[float, float, float, float], ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        try:
            mat = np.asarray(self.rows, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidParameter("multmatrix requires a 3x4 or 4x4 matrix.") from exc
        if mat.shape == (3, 4):
            mat = np.vstack([mat, [0.0, 0.0, 0.0, 1.0]])
        if mat.shape != (4, 4):
            raise InvalidParameter("multmatrix requires a 3x4 or 4x4 matrix.")
        if np.any(~np.isfinite(mat)):
            raise InvalidParameter("multmatrix contains invalid values.")
        object.__setattr__(self, "rows", tuple(tuple(float(c) for c in row) for row in mat))

    def arguments(self) -> Arguments:
        return (("m", self.rows),)

    def matrix(self) -> np.ndarray:
        return np.asarray(self.rows, dtype=float)


@dataclass(frozen=True)
class Color(Transform):
    scad_name = "color"

    value: Tuple[float, float, float, float] | str = (1.0, 1.0, 1.0, 1.0)
    alpha: float | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "value", normalize_color(self.value))
        object.__setattr__(self, "alpha", normalize_alpha(self.alpha))
        if self.alpha is not None and not isinstance(self.value, str):
            r, g, b, _ = self.value
            object.__setattr__(self, "value", (r, g, b, self.alpha))
            object.__setattr__(self, "alpha", None)

    def arguments(self) -> Arguments:
        if self.alpha is None:
            return (("c", self.value),)
        return (("c", self.value), ("alpha", self.alpha))

    def matrix(self) -> np.ndarray:
        return np.eye(4)


def translate(node: Node, offset: Sequence[float]) -> Node:
    """Return ``node`` moved by ``offset``; a zero offset returns ``node`` itself."""

    vec = require_vector(offset, "offset")
    if not any(vec):
        return node
    return Translate(child=node, offset=vec)


def rotate(node: Node, angles: Sequence[float]) -> Node:
    """Rotate by Euler angles in degrees (X, then Y, then Z)."""

    vec = require_vector(angles, "angles")
    if not any(vec):
        return node
    return Rotate(child=node, angles=vec)


def rotate_axis(node: Node, axis: Sequence[float], angle_deg: float) -> Node:
    """Rotate ``angle_deg`` degrees around an arbitrary axis through the origin."""

    return AxisRotate(child=node, angle=angle_deg, axis=axis)


def mirror(node: Node, normal: Sequence[float]) -> Node:
    return Mirror(child=node, normal=normal)


def scale(node: Node, factors: Sequence[float] | float) -> Node:
    if isinstance(factors, (int, float)):
        factors = (factors, factors, factors)
    vec = require_vector(factors, "factors")
    if vec == (1.0, 1.0, 1.0):
        return node
    return Scale(child=node, factors=vec)


def resize(node: Node, size: Sequence[float], auto: bool | Sequence[bool] = False) -> Node:
    return Resize(child=node, size=size, auto=auto)


def multmatrix(node: Node, matrix: np.ndarray | Sequence[Sequence[float]]) -> Node:
    """Apply an arbitrary affine matrix (3x4 or 4x4, row-major)."""

    return MultMatrix(child=node, rows=matrix)


def color(node: Node, color: ColorInput, alpha: float | None = None) -> Node:
    """Tag ``node`` with an RGB(A) tuple or an OpenSCAD color name."""

    return Color(child=node, value=color, alpha=alpha)


def compose_matrix(node: Node) -> np.ndarray:
    """Product of the affine transforms along the chain of single-child wrappers above a leaf."""

    mat = np.eye(4)
    current = node
    while isinstance(current, Transform):
        mat = mat @ current.matrix()
        current = current.child
    return mat

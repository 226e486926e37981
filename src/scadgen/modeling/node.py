"""Immutable scene-tree nodes shared by primitives, transforms and boolean operators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Literal, Sequence, Tuple

import numpy as np

from scadgen.validation import InvalidParameter

if TYPE_CHECKING:  # pragma: no cover - typing only
    from scadgen.modeling._color import ColorInput

NodeKind = Literal["primitive", "transform", "boolean"]
Arguments = Tuple[Tuple[str, Any], ...]


@dataclass(frozen=True)
class Node:
    """Base class for every element of a scene tree.

    Subclasses are frozen dataclasses; combining nodes always builds a new
    parent, so any subtree can be shared between several scenes.
    """

    kind: ClassVar[NodeKind]
    scad_name: ClassVar[str]

    @property
    def children(self) -> tuple["Node", ...]:
        return ()

    @property
    def dimensions(self) -> int:
        raise NotImplementedError

    def arguments(self) -> Arguments:
        """Return the ordered keyword arguments of the OpenSCAD statement."""

        return ()

    def walk(self):
        """Yield this node and all descendants depth-first, in child order."""

        yield self
        for child in self.children:
            yield from child.walk()

    def __add__(self, other: "Node") -> "Node":
        if not isinstance(other, Node):
            return NotImplemented
        from scadgen.modeling.csg import boolean_union

        return boolean_union([self, other])

    def __sub__(self, other: "Node") -> "Node":
        if not isinstance(other, Node):
            return NotImplemented
        from scadgen.modeling.csg import boolean_difference

        return boolean_difference(self, [other])

    def __mul__(self, other: "Node") -> "Node":
        if not isinstance(other, Node):
            return NotImplemented
        from scadgen.modeling.csg import boolean_intersection

        return boolean_intersection([self, other])

    def translate(self, offset: Sequence[float]) -> "Node":
        from scadgen.modeling.transform import translate

        return translate(self, offset)

    def rotate(self, angles: Sequence[float]) -> "Node":
        from scadgen.modeling.transform import rotate

        return rotate(self, angles)

    def rotate_axis(self, axis: Sequence[float], angle_deg: float) -> "Node":
        from scadgen.modeling.transform import rotate_axis

        return rotate_axis(self, axis, angle_deg)

    def mirror(self, normal: Sequence[float]) -> "Node":
        from scadgen.modeling.transform import mirror

        return mirror(self, normal)

    def scale(self, factors: Sequence[float] | float) -> "Node":
        from scadgen.modeling.transform import scale

        return scale(self, factors)

    def resize(self, size: Sequence[float], auto: bool | Sequence[bool] = False) -> "Node":
        from scadgen.modeling.transform import resize

        return resize(self, size, auto=auto)

    def multmatrix(self, matrix: np.ndarray | Sequence[Sequence[float]]) -> "Node":
        from scadgen.modeling.transform import multmatrix

        return multmatrix(self, matrix)

    def color(self, color: "ColorInput", alpha: float | None = None) -> "Node":
        from scadgen.modeling.transform import color as apply_color

        return apply_color(self, color, alpha=alpha)


@dataclass(frozen=True)
class Primitive(Node):
    kind: ClassVar[NodeKind] = "primitive"
    solid: ClassVar[bool] = True

    @property
    def dimensions(self) -> int:
        return 3 if self.solid else 2


@dataclass(frozen=True)
class Transform(Node):
    """Node wrapping exactly one child."""

    kind: ClassVar[NodeKind] = "transform"

    child: Node

    def __post_init__(self) -> None:
        if not isinstance(self.child, Node):
            raise InvalidParameter(f"{self.scad_name}() expects a Node child, got {type(self.child).__name__}.")

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.child,)

    @property
    def dimensions(self) -> int:
        return self.child.dimensions

    def matrix(self) -> np.ndarray:
        """Equivalent 4x4 affine matrix; wrappers without one raise :class:`InvalidParameter`."""

        raise InvalidParameter(f"{self.scad_name}() is not an affine transform.")


@dataclass(frozen=True)
class Operation(Node):
    """Boolean-style node over an ordered, non-empty tuple of children."""

    kind: ClassVar[NodeKind] = "boolean"

    operands: tuple[Node, ...]

    def __post_init__(self) -> None:
        operands = tuple(self.operands)
        if not operands:
            raise InvalidParameter(f"{self.scad_name}() requires at least one node.")
        for item in operands:
            if not isinstance(item, Node):
                raise InvalidParameter(f"{self.scad_name}() expects Node operands, got {type(item).__name__}.")
        dims = {item.dimensions for item in operands}
        if len(dims) > 1:
            raise InvalidParameter(f"{self.scad_name}() cannot mix 2D and 3D nodes.")
        object.__setattr__(self, "operands", operands)

    @property
    def children(self) -> tuple[Node, ...]:
        return self.operands

    @property
    def dimensions(self) -> int:
        return self.operands[0].dimensions


def resolution_arguments(segments: int | None, fa: float | None, fs: float | None) -> Arguments:
    """Per-node overrides of the global ``$fa``/``$fs``/``$fn`` header."""

    args = []
    if fa is not None:
        args.append(("$fa", fa))
    if fs is not None:
        args.append(("$fs", fs))
    if segments is not None:
        args.append(("$fn", segments))
    return tuple(args)

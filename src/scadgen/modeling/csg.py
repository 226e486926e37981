from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Union

from scadgen.modeling.node import Node, Operation
from scadgen.validation import InvalidParameter


@dataclass(frozen=True)
class BooleanUnion(Operation):
    scad_name = "union"

    def __add__(self, other: Node) -> Node:
        if not isinstance(other, Node):
            return NotImplemented
        return BooleanUnion(operands=self.operands + (other,))


@dataclass(frozen=True)
class BooleanDifference(Operation):
    """First operand is the base; the rest are subtracted in order."""

    scad_name = "difference"

    @property
    def base(self) -> Node:
        return self.operands[0]

    @property
    def cutters(self) -> tuple[Node, ...]:
        return self.operands[1:]

    def __sub__(self, other: Node) -> Node:
        if not isinstance(other, Node):
            return NotImplemented
        return BooleanDifference(operands=self.operands + (other,))


@dataclass(frozen=True)
class BooleanIntersection(Operation):
    scad_name = "intersection"

    def __mul__(self, other: Node) -> Node:
        if not isinstance(other, Node):
            return NotImplemented
        return BooleanIntersection(operands=self.operands + (other,))


@dataclass(frozen=True)
class Hull(Operation):
    scad_name = "hull"


def _collect(nodes: Iterable[Node], op: str) -> tuple[Node, ...]:
    if isinstance(nodes, Node):
        raise InvalidParameter(f"{op} expects an iterable of nodes, not a single node.")
    items = tuple(nodes)
    if not items:
        raise InvalidParameter(f"{op} requires at least one node.")
    return items


def boolean_union(nodes: Iterable[Node]) -> BooleanUnion:
    return BooleanUnion(operands=_collect(nodes, "boolean_union"))


def boolean_difference(base: Node, cutters: Iterable[Node]) -> BooleanDifference:
    """Subtract ``cutters`` from ``base``; the order given is the order written."""

    if isinstance(cutters, Node):
        raise InvalidParameter("boolean_difference expects an iterable of cutters, not a single node.")
    return BooleanDifference(operands=(base,) + tuple(cutters))


def boolean_intersection(nodes: Iterable[Node]) -> BooleanIntersection:
    return BooleanIntersection(operands=_collect(nodes, "boolean_intersection"))


def hull(nodes: Iterable[Node]) -> Hull:
    """Convex hull of the given nodes, evaluated by OpenSCAD."""

    return Hull(operands=_collect(nodes, "hull"))


def union_nodes(nodes: Union[Iterable[Node], Mapping[object, Node]]) -> BooleanUnion:
    """Convenience wrapper around boolean_union that accepts an iterable or mapping."""

    if isinstance(nodes, Mapping):
        nodes = nodes.values()
    return boolean_union(nodes)

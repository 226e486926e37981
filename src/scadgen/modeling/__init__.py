"""Modeling utilities: primitives, transforms and CSG helpers that build OpenSCAD scene trees."""

from __future__ import annotations

from .node import Node, Operation, Primitive, Transform
from .transform import (
    color,
    compose_matrix,
    mirror,
    multmatrix,
    resize,
    rotate,
    rotate_axis,
    scale,
    translate,
)
from .primitives import (
    make_cone,
    make_cube,
    make_cylinder,
    make_polyhedron,
    make_sphere,
)
from .drawing2d import make_circle, make_polygon, make_rect, make_square
from .extrude import linear_extrude, rotate_extrude
from .csg import boolean_difference, boolean_intersection, boolean_union, hull, union_nodes

__all__ = [
    "Node",
    "Operation",
    "Primitive",
    "Transform",
    "make_cube",
    "make_cylinder",
    "make_cone",
    "make_sphere",
    "make_polyhedron",
    "make_square",
    "make_rect",
    "make_circle",
    "make_polygon",
    "linear_extrude",
    "rotate_extrude",
    "boolean_union",
    "boolean_difference",
    "boolean_intersection",
    "hull",
    "union_nodes",
    "translate",
    "rotate",
    "rotate_axis",
    "mirror",
    "scale",
    "resize",
    "multmatrix",
    "color",
    "compose_matrix",
]

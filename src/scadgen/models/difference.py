"""Centered cube with a sphere carved out of it."""

from __future__ import annotations

from scadgen.modeling import Node, make_cube, make_sphere


def build() -> Node:
    return make_cube(15.0, center=True) - make_sphere(10.0)

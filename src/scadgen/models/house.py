"""Gable-roofed house with a door, two windows and a chimney."""

from __future__ import annotations

from scadgen.modeling import (
    Node,
    boolean_difference,
    linear_extrude,
    make_cube,
    make_polygon,
    rotate,
    translate,
)

WIDTH = 40.0
DEPTH = 30.0
WALL_HEIGHT = 25.0
ROOF_HEIGHT = 14.0
OVERHANG = 2.0
EPS = 0.001


def walls() -> Node:
    body = make_cube((WIDTH, DEPTH, WALL_HEIGHT))
    door = translate(make_cube((8.0, 2.0 + 2 * EPS, 14.0)), (16.0, -1.0, -EPS))
    windows = [
        translate(make_cube((7.0, 2.0 + 2 * EPS, 7.0)), (x, -1.0, 12.0))
        for x in (5.0, WIDTH - 12.0)
    ]
    return boolean_difference(body, [door, *windows])


def roof() -> Node:
    gable = make_polygon(
        [(-OVERHANG, 0.0), (DEPTH + OVERHANG, 0.0), (DEPTH / 2, ROOF_HEIGHT)]
    )
    prism = linear_extrude(gable, height=WIDTH + 2 * OVERHANG)
    # Extrusion axis becomes +X, gable profile lies in the YZ plane.
    prism = rotate(prism, (90.0, 0.0, 90.0))
    return translate(prism, (-OVERHANG, 0.0, WALL_HEIGHT))


def chimney() -> Node:
    return translate(make_cube((4.0, 4.0, 10.0)), (WIDTH - 10.0, DEPTH - 10.0, WALL_HEIGHT + 5.0))


def build() -> Node:
    return walls() + roof() + chimney()

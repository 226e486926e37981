"""Toy car: a two-tier body on two axles with a wheel at each end."""

from __future__ import annotations

from scadgen.modeling import Node, make_cube, make_cylinder, rotate, translate

AXLE_HALF_LENGTH = 15.0
# Thin slab fusing the two body tiers so the union is one manifold.
CONNECTOR_THICKNESS = 0.002


def car_body() -> Node:
    cube_a = make_cube((60.0, 20.0, 10.0), center=True)
    cube_b = translate(make_cube((30.0, 20.0, 10.0), center=True), (0.0, 0.0, 10.0))
    connector = make_cube((30.0, 20.0, CONNECTOR_THICKNESS), center=True)
    connector = translate(connector, (0.0, 0.0, 5.0 - CONNECTOR_THICKNESS / 2))

    return cube_a + cube_b + connector


def wheel() -> Node:
    return rotate(make_cylinder(3.0, 8.0), (90.0, 0.0, 0.0))


def axle() -> Node:
    left = translate(wheel(), (0.0, -AXLE_HALF_LENGTH, 0.0))
    right = translate(wheel(), (0.0, AXLE_HALF_LENGTH + 3.0, 0.0))

    shaft = make_cylinder(AXLE_HALF_LENGTH * 2 + CONNECTOR_THICKNESS, r1=3.0, r2=3.0, center=True)
    shaft = rotate(shaft, (90.0, 0.0, 0.0))

    return left + right + shaft


def build() -> Node:
    body = car_body()
    front_axle = translate(axle(), (20.0, 0.0, -2.0))
    back_axle = translate(axle(), (-20.0, 0.0, -2.0))

    return body + front_axle + back_axle

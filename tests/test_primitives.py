from __future__ import annotations

import math

import pytest

from scadgen.io.scad import format_statement
from scadgen.modeling import (
    make_circle,
    make_cone,
    make_cube,
    make_cylinder,
    make_polygon,
    make_polyhedron,
    make_sphere,
    make_rect,
    make_square,
)
from scadgen.validation import InvalidParameter


def test_cube_statement():
    cube = make_cube((25, 35, 55), center=True)
    assert format_statement(cube) == "cube(size=[25,35,55], center=true)"
    assert cube.kind == "primitive"
    assert cube.dimensions == 3


def test_cube_scalar_size():
    assert make_cube(2.5).size == (2.5, 2.5, 2.5)


def test_cube_zero_thickness_allowed():
    slab = make_cube((30.0, 20.0, 0.0))
    assert slab.size[2] == 0.0


@pytest.mark.parametrize("size", [(-1, 1, 1), (1, math.nan, 1), (1, 1, math.inf), (1, 2)])
def test_cube_invalid_size(size):
    with pytest.raises(InvalidParameter):
        make_cube(size)


def test_cylinder_positional_height_radius():
    wheel = make_cylinder(3.0, 8.0)
    assert format_statement(wheel) == "cylinder(h=3, r=8, center=false)"


def test_cylinder_frustum_and_overrides():
    cyl = make_cylinder(10, r1=2, r2=1, center=True, segments=64, fa=2, fs=0.5)
    assert format_statement(cyl) == "cylinder(h=10, r1=2, r2=1, center=true, $fa=2, $fs=0.5, $fn=64)"


def test_cylinder_radius_and_r1_conflict():
    with pytest.raises(InvalidParameter):
        make_cylinder(1.0, 1.0, r1=2.0)


def test_cylinder_requires_a_positive_radius():
    with pytest.raises(InvalidParameter):
        make_cylinder(1.0, r1=0.0, r2=0.0)


def test_cylinder_negative_radius():
    with pytest.raises(InvalidParameter):
        make_cylinder(1.0, -2.0)


def test_cone_from_diameters():
    cone = make_cone(bottom_diameter=4.0, top_diameter=0.0, height=3.0)
    assert (cone.r1, cone.r2) == (2.0, 0.0)


def test_sphere_statement_and_validation():
    assert format_statement(make_sphere(10)) == "sphere(r=10)"
    with pytest.raises(InvalidParameter):
        make_sphere(-1.0)
    with pytest.raises(InvalidParameter):
        make_sphere(1.0, segments=2.5)


def test_polyhedron_validates_face_indices():
    points = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)]
    tetra = make_polyhedron(points, [(0, 1, 2), (0, 1, 3), (1, 2, 3), (0, 2, 3)])
    assert len(tetra.faces) == 4
    with pytest.raises(InvalidParameter):
        make_polyhedron(points, [(0, 1, 9)])


def test_two_dimensional_primitives():
    assert make_square(3).dimensions == 2
    assert format_statement(make_square((2, 4), center=True)) == "square(size=[2,4], center=true)"
    assert format_statement(make_circle(1.5, segments=12)) == "circle(r=1.5, $fn=12)"
    assert make_rect((2, 4)).center is True
    tri = make_polygon([(0, 0), (1, 0), (0, 1)])
    assert format_statement(tri) == "polygon(points=[[0,0],[1,0],[0,1]], convexity=1)"


def test_polygon_requires_three_points():
    with pytest.raises(InvalidParameter):
        make_polygon([(0, 0), (1, 0)])


def test_nodes_are_immutable():
    cube = make_cube((1, 2, 3))
    with pytest.raises(AttributeError):
        cube.center = True

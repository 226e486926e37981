from __future__ import annotations

import pytest

from scadgen.io.scad import to_scad
from scadgen.modeling import (
    boolean_difference,
    boolean_intersection,
    boolean_union,
    hull,
    linear_extrude,
    make_cube,
    make_cylinder,
    make_sphere,
    make_square,
    union_nodes,
)
from scadgen.modeling.csg import BooleanDifference, BooleanIntersection, BooleanUnion
from scadgen.validation import InvalidParameter
from tests.helpers import statement_lines


def test_operators_map_to_boolean_nodes():
    a = make_cube(1)
    b = make_sphere(1)
    assert isinstance(a + b, BooleanUnion)
    assert isinstance(a - b, BooleanDifference)
    assert isinstance(a * b, BooleanIntersection)
    assert (a + b).kind == "boolean"


def test_chained_union_is_flat_and_operands_untouched():
    a, b, c = make_cube(1), make_sphere(1), make_cylinder(1, 1)
    ab = a + b
    abc = ab + c
    assert abc.operands == (a, b, c)
    assert ab.operands == (a, b)


def test_chained_union_matches_named_function():
    a, b, c = make_cube(1), make_sphere(1), make_cylinder(1, 1)
    assert to_scad(a + b + c) == to_scad(boolean_union([a, b, c]))


def test_union_is_commutative_at_statement_level():
    a = make_cube((1, 2, 3))
    b = make_sphere(2)
    ab = statement_lines(to_scad(boolean_union([a, b])))
    ba = statement_lines(to_scad(boolean_union([b, a])))
    assert ab != ba
    assert sorted(ab) == sorted(ba)


def test_difference_preserves_order():
    base = make_cube(10, center=True)
    hole = make_sphere(6)
    forward = statement_lines(to_scad(boolean_difference(base, [hole])))
    swapped = statement_lines(to_scad(boolean_difference(hole, [base])))
    assert forward[1:3] == ["cube(size=[10,10,10], center=true);", "sphere(r=6);"]
    assert swapped[1:3] == ["sphere(r=6);", "cube(size=[10,10,10], center=true);"]


def test_chained_difference_keeps_base_first():
    base, c1, c2 = make_cube(10), make_sphere(2), make_cylinder(20, 1)
    diff = base - c1 - c2
    assert diff.base is base
    assert diff.cutters == (c1, c2)


def test_intersection_preserves_order():
    a, b = make_cube(2), make_sphere(1.2)
    assert boolean_intersection([a, b]).operands == (a, b)
    assert (a * b * make_cube(1)).operands[:2] == (a, b)


def test_difference_without_cutters_and_single_node_rejection():
    base = make_cube(1)
    assert boolean_difference(base, []).operands == (base,)
    with pytest.raises(InvalidParameter):
        boolean_difference(base, make_sphere(1))


def test_empty_operations_rejected():
    with pytest.raises(InvalidParameter):
        boolean_union([])
    with pytest.raises(InvalidParameter):
        boolean_intersection([])
    with pytest.raises(InvalidParameter):
        hull([])


def test_mixed_dimensions_rejected():
    with pytest.raises(InvalidParameter):
        make_cube(1) + make_square(1)


def test_extrusion_joins_three_dimensional_operations():
    prism = linear_extrude(make_square(2), height=3)
    assert (prism + make_cube(1)).dimensions == 3


def test_hull_and_union_nodes_mapping():
    parts = {"left": make_sphere(1), "right": make_sphere(1).translate((5, 0, 0))}
    assert union_nodes(parts).operands == tuple(parts.values())
    assert to_scad(hull(parts.values())).splitlines()[2] == "hull() {"


def test_shared_subtree_renders_in_every_parent():
    wheel = make_cylinder(3, 8)
    scene = wheel.translate((0, -15, 0)) + wheel.translate((0, 15, 0))
    assert to_scad(scene).count("cylinder(h=3, r=8, center=false);") == 2


def test_operators_reject_non_node_operands():
    a, b = make_cube(1), make_sphere(1)
    with pytest.raises(TypeError):
        a + 5
    with pytest.raises(TypeError):
        a - "x"
    with pytest.raises(TypeError):
        a * None
    with pytest.raises(TypeError):
        (a + b) + 5
    with pytest.raises(TypeError):
        (a - b) - 1.5
    with pytest.raises(TypeError):
        (a * b) * [b]

from __future__ import annotations

import pytest

from scadgen.io.scad import to_scad
from scadgen.models import MODELS, get_model
from scadgen.models.car import axle, car_body
from scadgen.modeling.csg import BooleanDifference, BooleanUnion
from tests.helpers import statement_lines


@pytest.mark.parametrize("name", sorted(MODELS))
def test_models_build_solid_scenes(name):
    entry = get_model(name)
    node = entry.build()
    assert node.dimensions == 3
    assert entry.filename.endswith(".scad")
    assert to_scad(node) == to_scad(entry.build())


def test_default_is_the_car():
    assert get_model("default").build() == get_model("car").build()
    assert get_model("default").filename == "default.scad"


def test_unknown_model():
    with pytest.raises(KeyError):
        get_model("boat")


def test_car_body_parts():
    body = car_body()
    assert isinstance(body, BooleanUnion)
    assert len(body.operands) == 3
    lines = statement_lines(to_scad(body))
    assert "cube(size=[60,20,10], center=true);" in lines
    assert "translate(v=[0,0,10]) {" in lines
    assert "translate(v=[0,0,4.999]) {" in lines
    assert "cube(size=[30,20,0.002], center=true);" in lines


def test_axle_has_two_wheels_and_a_shaft():
    lines = statement_lines(to_scad(axle()))
    assert lines.count("cylinder(h=3, r=8, center=false);") == 2
    assert "cylinder(h=30.002, r=3, center=true);" in lines
    assert "translate(v=[0,-15,0]) {" in lines
    assert "translate(v=[0,18,0]) {" in lines


def test_car_layout():
    car = get_model("car").build()
    assert isinstance(car, BooleanUnion)
    # Body parts are extended in place, the two axles are appended.
    assert len(car.operands) == 5
    text = to_scad(car)
    assert text.count("cylinder(h=3, r=8, center=false);") == 4
    assert "translate(v=[20,0,-2]) {" in text
    assert "translate(v=[-20,0,-2]) {" in text


def test_house_parts():
    house = get_model("house").build()
    assert isinstance(house, BooleanUnion)
    walls = house.operands[0]
    assert isinstance(walls, BooleanDifference)
    assert len(walls.cutters) == 3
    lines = statement_lines(to_scad(house))
    assert "polygon(points=[[-2,0],[32,0],[15,14]], convexity=1);" in lines
    assert "rotate(a=[90,0,90]) {" in lines


def test_difference_model_lines():
    lines = statement_lines(to_scad(get_model("difference").build()))
    assert lines == [
        "difference() {",
        "cube(size=[15,15,15], center=true);",
        "sphere(r=10);",
        "}",
    ]

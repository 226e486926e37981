from __future__ import annotations

from pathlib import Path

import pytest

from scadgen import RenderSettings, Scene, make_scene
from scadgen.io.scad import WriteError, format_number, format_value, to_scad, write_scad
from scadgen.modeling import linear_extrude, make_cube, make_cylinder, make_polygon, make_sphere, rotate
from scadgen.validation import InvalidParameter


def test_centered_cube_end_to_end(tmp_path: Path):
    scene = Scene(make_cube((25, 35, 55), center=True), RenderSettings(fa=1.0, fs=0.4))
    path = write_scad(scene, tmp_path / "cube.scad")
    lines = path.read_text().splitlines()
    assert lines[0] == "$fa=1;$fs=0.4;$fn=32;"
    body = [line for line in lines[1:] if line.strip()]
    assert body == ["cube(size=[25,35,55], center=true);"]


def test_serialization_is_deterministic():
    def build():
        return make_scene(make_cylinder(10, r1=2.5, r2=1.25, segments=48), settings=RenderSettings(fa=2, fs=0.5, fn=0))

    assert to_scad(build()) == to_scad(build())
    assert to_scad(build()).encode() == build().to_scad().encode()


def test_three_primitives_single_header(tmp_path: Path):
    scene = make_scene(make_cube(1), make_sphere(2), make_cylinder(3, 1))
    text = scene.write(tmp_path / "three.scad").read_text()
    header_lines = [line for line in text.splitlines() if line.startswith("$")]
    assert len(header_lines) == 1
    assert "cube(size=[1,1,1], center=false);" in text
    assert "sphere(r=2);" in text
    assert "cylinder(h=3, r=1, center=false);" in text


def test_nested_layout_and_indentation():
    node = rotate(make_cube(2) - make_sphere(1), (90, 0, 0))
    assert to_scad(node).splitlines()[2:] == [
        "rotate(a=[90,0,0]) {",
        "  difference() {",
        "    cube(size=[2,2,2], center=false);",
        "    sphere(r=1);",
        "  }",
        "}",
    ]


def test_linear_extrude_arguments():
    prism = linear_extrude(make_polygon([(0, 0), (4, 0), (2, 3)]), height=5, twist=30, slices=10, scale=(1, 0.5))
    assert to_scad(prism).splitlines()[2] == (
        "linear_extrude(height=5, center=false, convexity=10, twist=30, slices=10, scale=[1,0.5]) {"
    )


def test_number_formatting():
    assert format_number(5.0 - 0.001) == "4.999"
    assert format_number(30.002) == "30.002"
    assert format_number(-0.0) == "0"
    assert format_number(1e-05) == "1e-05"
    assert format_value([True, "a\"b", None]) == '[true,"a\\"b",undef]'


def test_write_creates_missing_directories(tmp_path: Path):
    target = write_scad(make_scene(make_cube(1)), tmp_path / "out" / "nested" / "cube.scad")
    assert target.read_text().startswith("$fa=")


def test_write_error_when_parent_is_a_file(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(WriteError) as info:
        write_scad(make_scene(make_cube(1)), blocker / "out.scad")
    assert "blocker" in str(info.value)


def test_write_error_for_directory_target(tmp_path: Path):
    with pytest.raises(WriteError):
        write_scad(make_cube(1), tmp_path)


def test_scene_rejects_non_nodes():
    with pytest.raises(InvalidParameter):
        Scene(root="cube")
    with pytest.raises(InvalidParameter):
        make_scene()

"""CSG difference example."""

from __future__ import annotations

from pathlib import Path

from scadgen.modeling import boolean_difference, color, make_cube, make_cylinder


def build():
    base = color(make_cube(size=(20, 20, 20), center=True), (0.8, 0.8, 0.85))
    cutter = color(make_cylinder(height=25, radius=4, center=True), (1.0, 0.45, 0.2))
    return boolean_difference(base, [cutter])


if __name__ == "__main__":
    from scadgen.io.scad import write_scad

    OUTPUT = Path("dist")
    OUTPUT.mkdir(exist_ok=True)
    path = write_scad(build(), OUTPUT / "difference_example.scad")
    print("Saved", path)

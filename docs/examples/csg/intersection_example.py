"""CSG intersection example."""

from __future__ import annotations

from pathlib import Path

from scadgen.modeling import boolean_intersection, make_cube, make_sphere


def build():
    box = make_cube(size=(20, 20, 20), center=True)
    sphere = make_sphere(radius=12, segments=96)
    return boolean_intersection([box, sphere])


if __name__ == "__main__":
    from scadgen.io.scad import write_scad

    OUTPUT = Path("dist")
    OUTPUT.mkdir(exist_ok=True)
    path = write_scad(build(), OUTPUT / "intersection_example.scad")
    print("Saved", path)

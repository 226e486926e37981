"""CSG union example.

Run with:
  scadgen export docs/examples/csg/union_example.py -o union_example.scad
"""

from __future__ import annotations

from pathlib import Path

from scadgen.modeling import boolean_union, make_cube, make_cylinder


def build():
    box = make_cube(size=(20, 20, 10), center=True)
    cyl = make_cylinder(height=15, radius=6, center=True)
    return boolean_union([box, cyl])


if __name__ == "__main__":
    from scadgen.io.scad import write_scad

    OUTPUT = Path("dist")
    OUTPUT.mkdir(exist_ok=True)
    path = write_scad(build(), OUTPUT / "union_example.scad")
    print("Saved", path)

"""Demonstrate translate(), rotate() and mirror() helpers.

Run with:
  scadgen export docs/examples/transforms/transform_example.py
"""

from __future__ import annotations

from scadgen.modeling import make_cube, mirror, rotate, translate


def build():
    base = make_cube(size=(8, 8, 4), center=True).color("#5A7BFF")
    shifted = translate(base, (12.0, 0.0, 0.0))
    turned = rotate(base, (0.0, 0.0, 45.0))
    flipped = mirror(shifted, (1.0, 0.0, 0.0))
    return [base, shifted, turned, flipped]

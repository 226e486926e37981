"""Rotate extrude (lathe) example."""

from __future__ import annotations

from scadgen.modeling import rotate_extrude
from scadgen.modeling.drawing2d import make_polygon


def build():
    profile = make_polygon(
        [
            (4.0, -6.0),
            (8.0, -2.0),
            (7.0, 3.0),
            (4.0, 6.0),
            (2.0, 2.0),
        ]
    )
    return rotate_extrude(profile, angle=360, segments=64)

"""Linear extrude example: a twisted star."""

from __future__ import annotations

import numpy as np

from scadgen.modeling import linear_extrude
from scadgen.modeling.drawing2d import make_polygon


def build():
    angles = np.deg2rad(np.arange(0, 360, 36))
    radii = np.where(np.arange(angles.size) % 2 == 0, 10.0, 4.0)
    points = np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])
    profile = make_polygon(points)
    return linear_extrude(profile, height=20.0, twist=90.0, slices=40, scale=0.5)

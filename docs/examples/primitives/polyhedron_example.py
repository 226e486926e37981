"""Square pyramid built from explicit points and faces."""

from __future__ import annotations

from scadgen.modeling import make_polyhedron


def build():
    points = [(10, 10, 0), (10, -10, 0), (-10, -10, 0), (-10, 10, 0), (0, 0, 10)]
    faces = [(0, 1, 4), (1, 2, 4), (2, 3, 4), (3, 0, 4), (1, 0, 3), (2, 1, 3)]
    return make_polyhedron(points, faces)

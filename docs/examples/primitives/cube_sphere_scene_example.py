"""Scene with its own render settings; export keeps them unless overridden."""

from __future__ import annotations

from scadgen import RenderSettings, make_scene
from scadgen.modeling import make_cube, make_sphere


def build():
    return make_scene(
        make_cube(15, center=True) - make_sphere(10),
        settings=RenderSettings(fa=2.0, fs=0.5, fn=0),
    )

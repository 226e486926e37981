"""scadgen – compose CSG scenes in Python and write them as OpenSCAD files."""

from __future__ import annotations

from ._config import DEFAULT_RENDER_SETTINGS, RenderSettings, load_render_settings
from .scene import Scene, make_scene
from .validation import InvalidParameter

__all__ = [
    "__version__",
    "DEFAULT_RENDER_SETTINGS",
    "InvalidParameter",
    "RenderSettings",
    "Scene",
    "load_render_settings",
    "make_scene",
]

__version__ = "0.1.0"

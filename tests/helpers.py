from __future__ import annotations

from pathlib import Path

from scadgen.cli import _scene_factory_from_module
from scadgen.scene import Scene, as_scene


def load_scene(model_path: Path) -> Scene:
    """Load a model module and coerce its build() result into a Scene."""
    scene_factory = _scene_factory_from_module(model_path)
    return as_scene(scene_factory())


def statement_lines(text: str) -> list[str]:
    """Non-empty body lines of a .scad file, stripped of indentation."""
    lines = text.splitlines()[1:]
    return [line.strip() for line in lines if line.strip()]

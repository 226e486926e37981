from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from scadgen._config import DEFAULT_RENDER_SETTINGS, RenderSettings
from scadgen.modeling.csg import boolean_union
from scadgen.modeling.node import Node
from scadgen.validation import InvalidParameter


@dataclass(frozen=True)
class Scene:
    """A complete scene tree plus the render settings it is written with."""

    root: Node
    settings: RenderSettings = DEFAULT_RENDER_SETTINGS

    def __post_init__(self) -> None:
        if not isinstance(self.root, Node):
            raise InvalidParameter(f"Scene root must be a Node, got {type(self.root).__name__}.")
        if not isinstance(self.settings, RenderSettings):
            raise InvalidParameter("Scene settings must be RenderSettings.")

    def with_settings(self, settings: RenderSettings) -> "Scene":
        return Scene(root=self.root, settings=settings)

    def to_scad(self) -> str:
        from scadgen.io.scad import to_scad

        return to_scad(self)

    def write(self, path: Path) -> Path:
        from scadgen.io.scad import write_scad

        return write_scad(self, path)


def make_scene(*nodes: Node, settings: RenderSettings | None = None) -> Scene:
    """Wrap one node (or the union of several) into a Scene."""

    if not nodes:
        raise InvalidParameter("make_scene requires at least one node.")
    root = nodes[0] if len(nodes) == 1 else boolean_union(nodes)
    return Scene(root=root, settings=settings or DEFAULT_RENDER_SETTINGS)


def as_scene(value: object, settings: RenderSettings | None = None) -> Scene:
    """Coerce a build() result (Scene, Node, or a list/tuple of Nodes) into a Scene."""

    if isinstance(value, Scene):
        return value if settings is None else value.with_settings(settings)
    if isinstance(value, Node):
        return make_scene(value, settings=settings)
    if isinstance(value, (list, tuple)):
        items = list(value)
        if items and all(isinstance(item, Node) for item in items):
            return make_scene(*items, settings=settings)
    raise InvalidParameter(
        "Model build() must return a Node, a list of Nodes, or a Scene (e.g., make_cube((10, 10, 10)))."
    )

"""OpenSCAD text serializer.

Output layout::

    $fa=1;$fs=0.4;$fn=32;

    union() {
      cube(size=[60,20,10], center=true);
      ...
    }

The header is the only place global facet settings appear; per-node
``$fn``/``$fa``/``$fs`` arguments override it for that node only. Rendering
is a pure function of the scene, so equal scenes give byte-identical text.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, List

from scadgen._config import RenderSettings
from scadgen.modeling.node import Node
from scadgen.scene import Scene, as_scene

logger = logging.getLogger(__name__)

INDENT = "  "


class WriteError(OSError):
    """Raised when the output file cannot be created or written."""


def format_number(value: float) -> str:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Cannot serialize non-finite number {number!r}.")
    if number == 0:
        return "0"
    if number.is_integer() and abs(number) < 1e15:
        return str(int(number))
    return repr(number)


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(format_value(item) for item in value) + "]"
    if value is None:
        return "undef"
    return format_number(value)


def format_statement(node: Node) -> str:
    args = ", ".join(f"{key}={format_value(value)}" for key, value in node.arguments())
    return f"{node.scad_name}({args})"


def header_line(settings: RenderSettings) -> str:
    return f"$fa={format_number(settings.fa)};$fs={format_number(settings.fs)};$fn={settings.fn};"


def render_node(node: Node, depth: int = 0) -> List[str]:
    """Return the lines describing ``node`` at the given indentation depth."""

    pad = INDENT * depth
    statement = format_statement(node)
    if not node.children:
        return [f"{pad}{statement};"]

    lines = [f"{pad}{statement} {{"]
    for child in node.children:
        lines.extend(render_node(child, depth + 1))
    lines.append(f"{pad}}}")
    return lines


def to_scad(scene: Scene | Node) -> str:
    """Render a scene (or a bare node with default settings) as OpenSCAD source."""

    scene = as_scene(scene)
    lines = [header_line(scene.settings), ""]
    lines.extend(render_node(scene.root))
    return "\n".join(lines) + "\n"


def write_scad(scene: Scene | Node, path: Path) -> Path:
    """Write ``scene`` to ``path``, creating parent directories; failures surface as :class:`WriteError`."""

    path = Path(path)
    text = to_scad(scene)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Failed to write {path}: {exc.strerror or exc}") from exc
    logger.debug("Wrote %d bytes to %s", len(text), path)
    return path

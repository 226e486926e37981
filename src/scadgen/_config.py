from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict

from scadgen.validation import InvalidParameter, require_count, require_positive

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "_comment": "fa: angular facet size (degrees), fs: linear facet size, fn: segment count (0 disables).",
    "fa": 1.0,
    "fs": 0.4,
    "fn": 32,
}
_KEY_ALIASES = {
    "fa": "fa",
    "$fa": "fa",
    "angular_resolution": "fa",
    "fs": "fs",
    "$fs": "fs",
    "linear_resolution": "fs",
    "fn": "fn",
    "$fn": "fn",
    "segments": "fn",
}


@dataclass(frozen=True)
class RenderSettings:
    """Global facet resolution written once at the top of every file."""

    fa: float = 1.0
    fs: float = 0.4
    fn: int = 32

    def __post_init__(self) -> None:
        object.__setattr__(self, "fa", require_positive(self.fa, "fa"))
        object.__setattr__(self, "fs", require_positive(self.fs, "fs"))
        object.__setattr__(self, "fn", require_count(self.fn, "fn"))

    def with_overrides(
        self,
        fa: float | None = None,
        fs: float | None = None,
        fn: int | None = None,
    ) -> "RenderSettings":
        changes: Dict[str, Any] = {}
        if fa is not None:
            changes["fa"] = fa
        if fs is not None:
            changes["fs"] = fs
        if fn is not None:
            changes["fn"] = fn
        return replace(self, **changes) if changes else self


DEFAULT_RENDER_SETTINGS = RenderSettings()


def _normalize_key(key: str) -> str | None:
    return _KEY_ALIASES.get(key.strip().lower())


def parse_render_settings(raw_config: Dict[str, Any], base: RenderSettings = DEFAULT_RENDER_SETTINGS) -> RenderSettings:
    """Resolve a decoded config mapping on top of ``base``."""

    if not isinstance(raw_config, dict):
        raise InvalidParameter("Render config must be a JSON object.")

    values: Dict[str, Any] = {}
    for key, value in raw_config.items():
        if key.startswith("_"):
            continue
        normalized = _normalize_key(key)
        if normalized is None:
            raise InvalidParameter(f"Unknown render setting '{key}'. Valid keys: fa, fs, fn.")
        values[normalized] = value
    return base.with_overrides(**values)


def load_render_settings(path: Path | None = None) -> RenderSettings:
    """Return render settings from a JSON config file, or the defaults when ``path`` is None."""

    if path is None:
        return DEFAULT_RENDER_SETTINGS

    path = Path(path)
    try:
        raw_config = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidParameter(f"{path} is not valid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise InvalidParameter(f"{path} is not UTF-8 text: {exc.reason}") from exc
    except OSError as exc:
        raise InvalidParameter(f"Cannot read {path}: {exc.strerror or exc}") from exc

    settings = parse_render_settings(raw_config)
    logger.debug("Loaded render settings from %s: %s", path, settings)
    return settings


def default_config_text() -> str:
    return json.dumps(DEFAULT_CONFIG, indent=2) + "\n"

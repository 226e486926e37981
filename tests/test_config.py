from __future__ import annotations

import json
from pathlib import Path

import pytest

from scadgen._config import (
    DEFAULT_RENDER_SETTINGS,
    RenderSettings,
    default_config_text,
    load_render_settings,
    parse_render_settings,
)
from scadgen.validation import InvalidParameter


def test_defaults():
    settings = load_render_settings(None)
    assert settings is DEFAULT_RENDER_SETTINGS
    assert (settings.fa, settings.fs, settings.fn) == (1.0, 0.4, 32)


def test_load_from_file_with_aliases(tmp_path: Path):
    path = tmp_path / "render.json"
    path.write_text(json.dumps({"_comment": "x", "angular_resolution": 2, "$FS": 0.25, "segments": 0}))
    settings = load_render_settings(path)
    assert settings == RenderSettings(fa=2.0, fs=0.25, fn=0)


def test_default_config_text_round_trips(tmp_path: Path):
    path = tmp_path / "render.json"
    path.write_text(default_config_text())
    assert load_render_settings(path) == DEFAULT_RENDER_SETTINGS


def test_overrides_skip_none():
    base = RenderSettings()
    assert base.with_overrides() is base
    assert base.with_overrides(fn=64).fn == 64
    assert base.with_overrides(fa=3).fs == base.fs


@pytest.mark.parametrize(
    "raw",
    [
        {"fa": 0},
        {"fs": -1},
        {"fn": 1.5},
        {"fn": -3},
        {"resolution": 4},
    ],
)
def test_invalid_settings(raw):
    with pytest.raises(InvalidParameter):
        parse_render_settings(raw)


def test_invalid_json(tmp_path: Path):
    path = tmp_path / "render.json"
    path.write_text("{not json")
    with pytest.raises(InvalidParameter):
        load_render_settings(path)


def test_non_object_json(tmp_path: Path):
    path = tmp_path / "render.json"
    path.write_text("[1, 2]")
    with pytest.raises(InvalidParameter):
        load_render_settings(path)


def test_non_utf8_config(tmp_path: Path):
    path = tmp_path / "render.json"
    path.write_bytes(b"\xff\xfe{}")
    with pytest.raises(InvalidParameter):
        load_render_settings(path)


def test_unreadable_config_path(tmp_path: Path):
    with pytest.raises(InvalidParameter):
        load_render_settings(tmp_path)

"""Bundled example models the CLI can generate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from scadgen.modeling import Node

from . import car, difference, house


@dataclass(frozen=True)
class ModelEntry:
    name: str
    filename: str
    build: Callable[[], Node]
    description: str


MODELS: Dict[str, ModelEntry] = {
    "default": ModelEntry("default", "default.scad", car.build, "The car model, written to default.scad."),
    "car": ModelEntry("car", "car.scad", car.build, "Two-tier car body on two axles."),
    "house": ModelEntry("house", "house.scad", house.build, "Gable-roofed house with door, windows and chimney."),
    "difference": ModelEntry(
        "difference", "difference.scad", difference.build, "Cube with a sphere subtracted."
    ),
}


def get_model(name: str) -> ModelEntry:
    try:
        return MODELS[name]
    except KeyError as exc:
        raise KeyError(f"Unknown model '{name}'. Available: {', '.join(MODELS)}") from exc


__all__ = ["MODELS", "ModelEntry", "get_model"]

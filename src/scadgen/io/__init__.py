"""Writers for scene output formats."""

from __future__ import annotations

from .scad import WriteError, to_scad, write_scad

__all__ = ["WriteError", "to_scad", "write_scad"]

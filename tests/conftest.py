from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def examples_dir(project_root: Path) -> Path:
    return project_root / "docs" / "examples"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()

"""Shared fixtures for uritag tests."""
from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_template(pattern: str, *values: Any) -> SimpleNamespace:
    """Build a stand-in for a PEP 750 template; ``{}`` marks each interpolation."""
    strings = pattern.split("{}")
    assert len(strings) == len(values) + 1
    return SimpleNamespace(
        strings=tuple(strings),
        interpolations=tuple(
            SimpleNamespace(value=v, conversion=None, format_spec="") for v in values
        ),
    )


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def template() -> Callable[..., SimpleNamespace]:
    return make_template

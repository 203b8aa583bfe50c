"""Shared fixtures for bindgen tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from bindgen.loader import load_spec

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture(scope="session")
def characters_path() -> Path:
    """OpenAPI 3.1 YAML document with refs, nullable types and a 2xx/4xx mix."""
    return FIXTURES_DIR / "characters.yaml"


@pytest.fixture(scope="session")
def minimal_path() -> Path:
    """Single-operation JSON document."""
    return FIXTURES_DIR / "minimal.json"


@pytest.fixture
def characters_spec(characters_path) -> dict[str, Any]:
    # function-scoped: tests may mutate the returned dict
    return load_spec(characters_path)

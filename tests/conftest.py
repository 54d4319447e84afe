"""Global test setup

Role:
- test environment configuration
- shared category/product fixtures

Not here:
- raw data (lives in tests/fixtures)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Put the project root on the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("ENVIRONMENT", "test")

from tests.fixtures import CATEGORIES, PRODUCTS  # noqa: E402
from turkish_search.schemas.search_schema import Category, Product  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """Test environment variables (session-wide)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def category_dicts() -> list[dict]:
    """Category records as plain dicts (fresh copies)"""
    return [dict(c) for c in CATEGORIES]


@pytest.fixture
def categories() -> list[Category]:
    return [Category(**c) for c in CATEGORIES]


@pytest.fixture
def products() -> list[Product]:
    return [Product(**p) for p in PRODUCTS]

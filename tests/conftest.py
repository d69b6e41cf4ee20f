"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def scope_table_html() -> str:
    return _read_fixture("scope_table.html")


@pytest.fixture
def scope_text_html() -> str:
    return _read_fixture("scope_text.html")


@pytest.fixture
def no_scope_html() -> str:
    return _read_fixture("no_scope.html")

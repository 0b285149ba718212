"""Shared fixtures for the string-switches tests."""

from __future__ import annotations

import pytest

COFFEE_ORDER = (
    '/coffee /milk soy /brand "Blind Tiger" /temp hot /sugar /syrup ginger vanilla'
)


@pytest.fixture
def coffee_order() -> str:
    """The canonical switch string from the package docs."""
    return COFFEE_ORDER


@pytest.fixture
def aliases() -> dict[str, str]:
    return {"urgency": "priority", "pri": "priority", "desc": "description"}

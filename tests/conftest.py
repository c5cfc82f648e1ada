"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture()
def arrays_schema() -> dict[str, Any]:
    """Schema describing ``one[].two[].ok`` as a boolean field."""
    return {
        "type": "object",
        "properties": {
            "one": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "two": {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "properties": {"ok": {"type": "boolean"}},
                            },
                        }
                    },
                },
            }
        },
    }


@pytest.fixture()
def arrays_document() -> dict[str, Any]:
    """Document whose ``one[0].two[1].ok`` holds ``0`` instead of a boolean."""
    return {"one": [{"two": [{"ok": True}, {"ok": 0}]}]}


@pytest.fixture()
def arrays_result() -> dict[str, Any]:
    """Validator result tree for ``arrays_document`` against ``arrays_schema``."""
    return {
        "properties": {
            "one": {"items": {0: {"properties": {"two": {"items": {1: {"properties": {"ok": {"type": "boolean"}}}}}}}}}
        }
    }

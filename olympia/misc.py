"""Small helpers shared across the model."""

from __future__ import annotations

from typing import Any


def is_one_of(var: Any, *args: Any) -> bool:
    """Return True if ``var`` equals any of the given values."""
    return any(var == value for value in args)
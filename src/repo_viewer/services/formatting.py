"""Display helpers shared by the views."""

from __future__ import annotations

from typing import Any


def display_text(value: Any, fallback: str = "") -> str:
    """Return *value* as text, or *fallback* when it is absent, null or empty."""
    if value is None or value == "":
        return fallback
    return str(value)


def display_metric(value: Any) -> str:
    """Render a count as-is; zero stays ``"0"``, only a missing value is blank."""
    if value is None:
        return ""
    return str(value)

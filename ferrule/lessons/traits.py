"""One operation implemented separately for several types."""

from __future__ import annotations

from functools import singledispatch
from typing import Any


@singledispatch
def append_bar(value: Any) -> Any:
    """Append "Bar" to a string or a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register(str)
def _append_bar_str(value: str) -> str:
    return value + "Bar"


@append_bar.register(list)
def _append_bar_list(value: list) -> list:
    return [*value, "Bar"]
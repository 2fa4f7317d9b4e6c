"""Passing lists into and out of functions."""

from __future__ import annotations


def fill_vec(vec: list[int] | None = None) -> list[int]:
    """Append 22, 44 and 66 to the list given, or to a new one, and return it."""
    if vec is None:
        vec = []
    vec.extend((22, 44, 66))
    return vec


def describe_vec(label: str, vec: list[int]) -> str:
    """Describe a list by its label, length and contents."""
    return f"{label} has length {len(vec)} content `{vec!r}`"
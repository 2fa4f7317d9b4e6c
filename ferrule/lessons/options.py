"""Values that may be missing, and two lint-clean idioms."""

from __future__ import annotations

import sys
from collections.abc import Iterator


def print_number(maybe_number: int | None) -> None:
    """Print a number that must be present."""
    if maybe_number is None:
        raise ValueError("expected a number, got None")
    print(f"printing: {maybe_number}")


def number_options() -> list[int | None]:
    """Five optional numbers computed from their positions."""
    return [((i * 1235) + 2) // (4 * 16) for i in range(5)]


def describe_optional(value: object | None) -> str:
    """Say what an optional value holds."""
    if value is not None:
        return f"the value of optional value is: {value}"
    return "The optional value doesn't contain anything!"


def drain_values(values: list[int | None]) -> Iterator[int]:
    """Pop values from the end of the list until it is empty or a None is popped."""
    while values:
        value = values.pop()
        if value is None:
            return
        yield value


def floats_differ(x: float, y: float) -> bool:
    """Compare floats with a tolerance instead of exact inequality."""
    return abs(y - x) > sys.float_info.epsilon


def add_optional(res: int, option: int | None) -> int:
    """Add an optional number to res when it is present."""
    if option is not None:
        res += option
    return res
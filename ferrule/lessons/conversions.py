"""Converting between text, numbers and records, with and without failure."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+")
_USIZE_MAX = (1 << 64) - 1


def byte_counter(arg: str) -> int:
    """Number of bytes in the UTF-8 encoding of the text."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in the text."""
    return len(arg)


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of the values; NaN for an empty sequence."""
    if not values:
        return math.nan
    return math.fsum(values) / len(values)


def _parse_unsigned(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def parse(cls, s: str) -> Person:
        """Parse "name,age"; raise ValueError if the text does not fit."""
        if not s:
            raise ValueError("empty input")
        parts = s.split(",")
        if len(parts) != 2:
            raise ValueError(f"expected exactly two comma separated fields, got {len(parts)}")
        name, age_text = parts
        if not name:
            raise ValueError("the name is empty")
        return cls(name=name, age=_parse_unsigned(age_text))

    @classmethod
    def from_text(cls, s: str) -> Person:
        """Parse "name,age", falling back to the default person on any error."""
        try:
            return cls.parse(s)
        except ValueError:
            return cls.default()


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Color:
        """Build a colour from exactly three components in range.

        Raises ValueError for a wrong count or a component out of range.
        """
        components = tuple(values)
        if len(components) != 3:
            raise ValueError(f"expected 3 components, got {len(components)}")
        for component in components:
            if not isinstance(component, int):
                raise TypeError(f"colour components must be integers, got {component!r}")
            if not 0 <= component <= 255:
                raise ValueError(f"colour component {component} is outside 0..=255")
        red, green, blue = components
        return cls(red=red, green=green, blue=blue)
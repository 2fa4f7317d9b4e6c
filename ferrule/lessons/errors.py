"""Reporting failures with exceptions and passing them on."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > (1 << (bits - 1)) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the text of a name tag; empty names are refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for a typed-in quantity: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    return qty * cost_per_item + processing_fee


def buy(tokens: int, item_quantity: str) -> int:
    """Buy items if affordable; print the outcome and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A number could not become a PositiveNonzeroInteger."""

    NEGATIVE = "Number is negative"
    ZERO = "Number is zero"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationError.ZERO)
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)


def read_and_validate(stream: IO) -> PositiveNonzeroInteger:
    """Read one line and turn it into a PositiveNonzeroInteger.

    Read errors, parse errors and validation errors all propagate.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    return PositiveNonzeroInteger(_parse_int(line.strip(), 64))
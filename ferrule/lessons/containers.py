"""Lists and dictionaries: building, transforming and filling them."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto


class Fruit(Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LICHI = auto()
    PINEAPPLE = auto()


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    v = list(a)
    return a, v


def vec_loop(v: Iterable[int]) -> list[int]:
    """Return every element multiplied by 2."""
    return [x * 2 for x in v]


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five pieces of fruit."""
    basket = {"banana": 2}
    basket["apple"] = 2
    basket["mango"] = 1
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every kind of fruit the basket does not hold yet.

    Kinds already present are left untouched.
    """
    for fruit in Fruit:
        basket.setdefault(fruit, 1)
"""Namespaces, re-exported names and a helper with several call shapes."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

_fruits = SimpleNamespace(PEAR="Pear", APPLE="Apple")
_veggies = SimpleNamespace(CUCUMBER="Cucumber", CARROT="Carrot")

delicious_snacks = SimpleNamespace(fruit=_fruits.PEAR, veggie=_veggies.CUCUMBER)


def make_sausage() -> str:
    """Print a sausage and return the printed text."""
    text = "sausage!"
    print(text)
    return text


def favorite_snacks() -> str:
    """Describe the favourite fruit and vegetable."""
    return f"favorite snacks: {delicious_snacks.fruit} and {delicious_snacks.veggie}"


def my_macro(*args: Any) -> None:
    """Print a fixed line with no argument, or a line showing one argument."""
    match args:
        case ():
            print("Check out my macro!")
        case (value,):
            print(f"Look at this other macro: {value}")
        case _:
            raise TypeError(f"my_macro takes 0 or 1 arguments, got {len(args)}")


def hello(text: str) -> str:
    """Prefix text with a greeting."""
    return f"Hello {text}"
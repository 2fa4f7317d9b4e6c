"""Variables, functions, conditionals, primitive types and strings."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def spell_number() -> list[str]:
    """Show a name rebound from a string to a number."""
    number: Any = "T-H-R-E-E"
    lines = [f"Spell a Number : {number}"]
    number = 3
    lines.append(f"Number plus two is : {number + 2}")
    return lines


def ring_calls(num: int) -> Iterator[str]:
    """Yield one ring line per call, numbered from 1."""
    for count in range(1, num + 1):
        yield f"Ring! Call number {count}"


def is_even(num: int) -> bool:
    """True for even numbers."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return num times itself."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a >= b else b


def fizz_if_foo(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    match fizzish:
        case "fizz":
            return "foo"
        case "fuzz":
            return "bar"
        case _:
            return "baz"


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """Return the greetings that fit the time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(ch: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected exactly one character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(items: Sequence[Any]) -> str:
    """Comment on whether a sequence holds at least 100 elements."""
    if len(items) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(items: Sequence[Any]) -> Sequence[Any]:
    """Return the second to fourth elements."""
    return items[1:4]


def second_of(numbers: Sequence[Any]) -> Any:
    """Return the second element of a tuple or sequence."""
    return numbers[1]


def describe_cat(cat: tuple[str, float]) -> str:
    """Unpack a (name, age) pair into a sentence."""
    name, age = cat
    return f"{name} is {age} years old."


def current_favorite_color() -> str:
    """Return the favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words that are known."""
    return attempt in _COLOR_WORDS


def calculate_apple_price(number: int) -> int:
    """Apples cost 2 each, or 1 each in orders of 40 or more."""
    return number * 2 if number < 40 else number


def string_slice(arg: str) -> None:
    """Print a borrowed piece of text."""
    print(arg)


def string(arg: str) -> None:
    """Print an owned piece of text."""
    print(arg)


def times_two(num: int) -> int:
    """Return num doubled."""
    return num * 2
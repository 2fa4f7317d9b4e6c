"""Recursive lists, iterators and arithmetic that can fail."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; the list ends with None."""

    value: int
    rest: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.rest


def _cons_list(values: Iterable[int]) -> Cons | None:
    """Build a cons list holding the values in order; None when there are none."""
    head: Cons | None = None
    for value in reversed(list(values)):
        head = Cons(value, head)
    return head


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return _cons_list(())


def create_non_empty_list() -> Cons | None:
    """A cons list holding 1 and 2."""
    return _cons_list((1, 2))


def favorite_fruits() -> Iterator[str]:
    """An iterator over the favourite fruits, in order."""
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def capitalize_first(text: str) -> str:
    """Upper-case the first character and keep the rest."""
    return text[:1].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalise each word."""
    return [capitalize_first(word) for word in words]


def capitalize_joined(words: Iterable[str]) -> str:
    """Capitalise each word and join them without separators."""
    return "".join(capitalize_words(words))


class NotDivisibleError(ArithmeticError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(ZeroDivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DivideByZeroError)

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide a by b exactly; raise if b is zero or does not divide a."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


def result_with_list(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number; the first failure is raised."""
    return [divide(n, divisor) for n in numbers]


def list_of_results(
    numbers: Iterable[int], divisor: int
) -> list[int | NotDivisibleError | DivideByZeroError]:
    """Divide every number, keeping failures as exception objects in place."""
    results: list[int | NotDivisibleError | DivideByZeroError] = []
    for n in numbers:
        try:
            results.append(divide(n, divisor))
        except (NotDivisibleError, DivideByZeroError) as error:
            results.append(error)
    return results


def factorial(num: int) -> int:
    """Product of 1..=num; 1 for zero."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, num + 1))
"""Containers and records that work with values of any type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def shopping_list() -> list[str]:
    """A shopping list holding milk."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass
class ReportCard(Generic[T]):
    """A student's grade, numeric or alphabetical."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        """Render the report card as one line."""
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"
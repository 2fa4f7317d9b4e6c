"""Plain, tuple-like and unit records, and a record with behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassicStruct:
    """A colour with named fields."""

    hex: str
    name: str


class ColorTupleStruct(NamedTuple):
    """A colour addressed by position: name first, then hex."""

    name: str
    hex: str


@dataclass(frozen=True, repr=False)
class UnitStruct:
    """A record with no fields."""

    def __repr__(self) -> str:
        return "UnitStruct"


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A parcel sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("a package must weigh more than 0 grams")

    def is_international(self) -> bool:
        """True when sender and recipient are in different countries."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Shipping cost in cents."""
        return cents_per_gram * self.weight_in_grams
"""
Domain models — immutable value objects used by the examples.

All models are frozen dataclasses. Models that take part in a tagged union
carry a `kind` discriminant defaulting to their variant name, so they can be
routed with fpkit.match_kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class Item:
    name: str
    price: float


@dataclass(frozen=True, slots=True)
class Cart:
    """A shopping cart; `total` is the amount charged at checkout."""

    items: tuple[Item, ...] = ()
    total: float = 0

    @staticmethod
    def of(*items: Item) -> Cart:
        """Build a cart whose total is the sum of its item prices."""
        return Cart(items=items, total=sum(item.price for item in items))


@dataclass(frozen=True, slots=True)
class Account:
    balance: float
    frozen: bool = False


@dataclass(frozen=True, slots=True)
class User:
    """A user record decoded from an encoded JSON payload."""

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Email:
    value: str
    kind: Literal["Email"] = "Email"


@dataclass(frozen=True, slots=True)
class PhoneNumber:
    value: str
    kind: Literal["PhoneNumber"] = "PhoneNumber"


type LoginName = Email | PhoneNumber


@dataclass(frozen=True, slots=True)
class Response:
    """A serialized response body together with its length in characters."""

    body: str
    content_length: int


@dataclass(frozen=True, slots=True)
class Movie:
    title: str
    release_year: int
    rating_position: int
    award: str | None = None


@dataclass(frozen=True, slots=True)
class Circle:
    radius: float
    kind: Literal["circle"] = "circle"


@dataclass(frozen=True, slots=True)
class Square:
    side: float
    kind: Literal["square"] = "square"


type Shape = Circle | Square

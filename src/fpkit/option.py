"""
Option — a present/absent container.

An Option[A] is either Present(value: A) or Empty(). It replaces None
sentinels with a value that has the same map / chain / match vocabulary as
Result, minus the error payload.

    >>> Option.some(2).map(lambda x: 1 / x)
    Present(0.5)
    >>> Option.none().map(lambda x: 1 / x)
    Empty()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    TypeGuard,
    TypeVar,
    overload,
)

from fpkit.errors import UnwrapError

if TYPE_CHECKING:
    from fpkit.result import Result

A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")
R = TypeVar("R")


class Option(Generic[A]):
    """
    Disjoint present/absent container.

    All transformations short-circuit on Empty; alt() short-circuits on
    Present.
    """

    def is_present(self) -> bool:
        return isinstance(self, Present)

    def is_empty(self) -> bool:
        return isinstance(self, Empty)

    def value(self) -> A:
        """Extract the present value. Raises UnwrapError on Empty."""
        match self:
            case Present(v):
                return v
            case Empty():
                raise UnwrapError("Cannot get value from an Empty option")
        raise TypeError("unreachable")  # pragma: no cover

    def match(self, on_empty: Callable[[], R], on_present: Callable[[A], R]) -> R:
        """
        Fold both branches into a common result type R.

            inverse(x).match(
                lambda: f"Cannot get the inverse of {x}.",
                lambda ix: f"The inverse of {x} is {ix}",
            )
        """
        match self:
            case Present(v):
                return on_present(v)
            case Empty():
                return on_empty()
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[A], B]) -> Option[B]:
        """Transform the present value. Empty stays Empty, mapper never called."""
        match self:
            case Present(v):
                return Present(mapper(v))
            case Empty():
                return _EMPTY
        raise TypeError("unreachable")  # pragma: no cover

    def chain(self, mapper: Callable[[A], Option[B]]) -> Option[B]:
        """
        Chain an Option-returning function (flat_map). Short-circuits on Empty.

            Option.some(5).chain(inverse)   # → Present(0.2)
            Option.some(0).chain(inverse)   # → Empty()
        """
        match self:
            case Present(v):
                return mapper(v)
            case Empty():
                return _EMPTY
        raise TypeError("unreachable")  # pragma: no cover

    def filter(self, predicate: Callable[[A], bool]) -> Option[A]:
        """Keep the present value only if it satisfies the predicate."""
        return self.chain(lambda v: self if predicate(v) else _EMPTY)

    def alt(self, fallback: Callable[[], Option[B]]) -> Option[A | B]:
        """
        Replace Empty by an independent alternative. Present passes through
        and the fallback is never called.
        """
        match self:
            case Present(v):
                return Present(v)
            case Empty():
                return fallback()
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else(self, default: Callable[[], A]) -> A:
        """
        Unwrap the present value or compute a default of the same type.

        Use get_or_else_widen() when the default is of another type.
        """
        match self:
            case Present(v):
                return v
            case Empty():
                return default()
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else_widen(self, default: Callable[[], B]) -> A | B:
        """Like get_or_else(), but the default may be of another type."""
        match self:
            case Present(v):
                return v
            case Empty():
                return default()
        raise TypeError("unreachable")  # pragma: no cover

    def to_result(self, on_empty: Callable[[], E]) -> Result[E, A]:
        """Present(a) → Success(a); Empty → Failure(on_empty())."""
        from fpkit.result import Result

        match self:
            case Present(v):
                return Result.success(v)
            case Empty():
                return Result.failure(on_empty())
        raise TypeError("unreachable")  # pragma: no cover

    @staticmethod
    def some(value: B) -> Option[B]:
        return Present(value)

    @staticmethod
    def none() -> Option[Any]:
        return _EMPTY

    @staticmethod
    def from_nullable(value: B | None) -> Option[B]:
        """None → Empty, anything else (0, "", [] included) → Present."""
        if value is None:
            return _EMPTY
        return Present(value)

    @overload
    @staticmethod
    def from_predicate(predicate: Callable[[A], TypeGuard[B]]) -> Callable[[A], Option[B]]: ...

    @overload
    @staticmethod
    def from_predicate(predicate: Callable[[A], bool]) -> Callable[[A], Option[A]]: ...

    @staticmethod
    def from_predicate(predicate: Callable[[A], Any]) -> Callable[[A], Option[Any]]:
        """
        Build a lifting function: Present(a) when predicate(a) holds, else Empty.

        A TypeGuard predicate narrows the payload type. Over a Shape union,
        a TypeGuard[Circle] predicate gives Option[Circle] rather than
        Option[Shape]; callers can use the circle's fields without checking
        its tag again.
        """

        def lift(value: A) -> Option[Any]:
            if predicate(value):
                return Present(value)
            return _EMPTY

        return lift

    def __bool__(self) -> bool:
        return self.is_present()


@dataclass(frozen=True, slots=True)
class Present(Option[A]):
    """A present value of type A."""

    _value: A

    def __repr__(self) -> str:
        return f"Present({self._value!r})"


@dataclass(frozen=True, slots=True)
class Empty(Option[Any]):
    """No value. All Empty instances compare equal."""

    def __repr__(self) -> str:
        return "Empty()"


_EMPTY: Option[Any] = Empty()


# ──────────────────────── Pipeable operators ────────────────────────

some = Option.some
none = Option.none
from_nullable = Option.from_nullable
from_predicate = Option.from_predicate


def map(mapper: Callable[[A], B]) -> Callable[[Option[A]], Option[B]]:
    return lambda o: o.map(mapper)


def chain(mapper: Callable[[A], Option[B]]) -> Callable[[Option[A]], Option[B]]:
    return lambda o: o.chain(mapper)


def filter(predicate: Callable[[A], bool]) -> Callable[[Option[A]], Option[A]]:
    return lambda o: o.filter(predicate)


def alt(fallback: Callable[[], Option[B]]) -> Callable[[Option[A]], Option[A | B]]:
    return lambda o: o.alt(fallback)


def get_or_else(default: Callable[[], A]) -> Callable[[Option[A]], A]:
    return lambda o: o.get_or_else(default)


def get_or_else_widen(default: Callable[[], B]) -> Callable[[Option[A]], A | B]:
    return lambda o: o.get_or_else_widen(default)


def match(on_empty: Callable[[], R], on_present: Callable[[A], R]) -> Callable[[Option[A]], R]:
    return lambda o: o.match(on_empty, on_present)


def to_result(on_empty: Callable[[], E]) -> Callable[[Option[A]], Result[E, A]]:
    return lambda o: o.to_result(on_empty)

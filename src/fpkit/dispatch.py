"""
Exhaustive dispatch over tagged unions.

A failure payload is often a union of distinct error kinds, each a record
carrying a string discriminant:

    @dataclass(frozen=True, slots=True)
    class AccountFrozen:
        message: str
        kind: Literal["AccountFrozen"] = "AccountFrozen"

match_kind() builds a function that routes such a value to exactly one
handler keyed by its discriminant. The declared variants are compared with
the handler keys when the dispatcher is BUILT, so a forgotten kind fails at
import/test time instead of on the first unlucky input:

    describe = match_kind(
        AccountFrozen | NotEnoughBalance,
        {
            "AccountFrozen": lambda e: e.message,
            "NotEnoughBalance": lambda e: e.message,
        },
    )

Plain string literals are tagged values too; their discriminant is the
string itself (match_kind(Literal["MalformedEmail", "NotAnEmail"], ...)).
"""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, Callable, Literal, TypeAliasType, TypeVar, Union, get_args, get_origin

from fpkit.errors import NonExhaustiveMatchError

R = TypeVar("R")

DEFAULT_FIELD = "kind"


def kind_of(value: Any, field: str = DEFAULT_FIELD) -> str:
    """Read the discriminant of a tagged value (a string is its own kind)."""
    if isinstance(value, str):
        return value
    kind = getattr(value, field, None)
    if not isinstance(kind, str):
        raise TypeError(f"{value!r} has no string {field!r} discriminant")
    return kind


def declared_kinds(variants: Any, field: str = DEFAULT_FIELD) -> frozenset[str]:
    """
    Collect the discriminants a variant declaration stands for.

    Accepts a Union (or X | Y) of tagged classes, a `type` alias of one,
    a Literal of strings, a single tagged class, a single string, or an
    iterable of strings.
    """
    if isinstance(variants, str):
        return frozenset([variants])
    if isinstance(variants, TypeAliasType):
        return declared_kinds(variants.__value__, field)

    origin = get_origin(variants)
    if origin is Literal:
        literals = get_args(variants)
        if not all(isinstance(lit, str) for lit in literals):
            raise TypeError(f"Only string literals can be dispatched on: {variants!r}")
        return frozenset(literals)
    if origin is Union or origin is types.UnionType:
        kinds: set[str] = set()
        for arg in get_args(variants):
            kinds |= declared_kinds(arg, field)
        return frozenset(kinds)

    if isinstance(variants, type):
        return frozenset([_class_kind(variants, field)])

    if isinstance(variants, Iterable):
        kinds = set()
        for item in variants:
            kinds |= declared_kinds(item, field)
        return frozenset(kinds)

    raise TypeError(f"Cannot read variant kinds from {variants!r}")


def _class_kind(cls: type, field: str) -> str:
    """Discriminant of a tagged class: its dataclass field default or class attribute."""
    if dataclasses.is_dataclass(cls):
        for f in dataclasses.fields(cls):
            if f.name == field and isinstance(f.default, str):
                return f.default
    kind = cls.__dict__.get(field)
    if isinstance(kind, str):
        return kind
    raise TypeError(f"{cls.__name__} does not declare a default {field!r} discriminant")


def dispatch_on(
    handlers: Mapping[str, Callable[[Any], R]],
    *,
    field: str = DEFAULT_FIELD,
) -> Callable[[Any], R]:
    """
    Open dispatcher: no declared variants, unknown kinds only fail when called.

    Prefer match_kind() whenever the set of variants is known.
    """
    table = MappingProxyType(dict(handlers))

    def dispatch(tagged: Any) -> R:
        kind = kind_of(tagged, field)
        handler = table.get(kind)
        if handler is None:
            raise NonExhaustiveMatchError(
                f"No handler registered for kind {kind!r}",
                missing=[kind],
            )
        return handler(tagged)

    return dispatch


def match_kind(
    variants: Any,
    handlers: Mapping[str, Callable[[Any], R]],
    *,
    field: str = DEFAULT_FIELD,
) -> Callable[[Any], R]:
    """
    Exhaustive dispatcher over the declared variants.

    Raises NonExhaustiveMatchError right away if a declared kind has no
    handler or a handler is registered for an undeclared kind.
    """
    expected = declared_kinds(variants, field)
    registered = frozenset(handlers)
    missing = expected - registered
    unexpected = registered - expected
    if missing or unexpected:
        parts = []
        if missing:
            parts.append(f"missing handlers for {sorted(missing)}")
        if unexpected:
            parts.append(f"handlers for undeclared kinds {sorted(unexpected)}")
        raise NonExhaustiveMatchError(
            "Non-exhaustive dispatch: " + "; ".join(parts),
            missing=missing,
            unexpected=unexpected,
        )
    return dispatch_on(handlers, field=field)

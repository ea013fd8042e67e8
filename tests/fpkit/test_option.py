"""Tests for Option — the present/absent container."""

from __future__ import annotations

import dataclasses
from typing import TypeGuard
from unittest.mock import MagicMock

import pytest

from fpkit import Empty, Failure, Option, Present, Success, UnwrapError, pipe
from fpkit import option


def _is_even(n: int) -> bool:
    return n % 2 == 0


class TestCreation:
    def test_some_is_present(self):
        o = Option.some(3)
        assert o.is_present()
        assert not o.is_empty()
        assert o.value() == 3

    def test_none_is_empty(self):
        o = Option.none()
        assert o.is_empty()
        assert o == Empty()

    def test_value_on_empty_raises(self):
        with pytest.raises(UnwrapError, match="Empty"):
            Option.none().value()

    def test_from_nullable(self):
        assert Option.from_nullable(3) == Present(3)
        assert Option.from_nullable(None) == Empty()

    @pytest.mark.parametrize("value", [0, "", [], False])
    def test_from_nullable_keeps_falsy_values(self, value):
        assert Option.from_nullable(value) == Present(value)


class TestFromPredicate:
    def test_even_is_present(self):
        assert Option.from_predicate(_is_even)(4) == Present(4)

    def test_odd_is_empty(self):
        assert Option.from_predicate(_is_even)(5) == Empty()

    def test_type_guard_narrowing_keeps_the_object(self):
        @dataclasses.dataclass(frozen=True)
        class Circle:
            radius: float
            kind: str = "circle"

        @dataclasses.dataclass(frozen=True)
        class Square:
            side: float
            kind: str = "square"

        def is_circle(shape: Circle | Square) -> TypeGuard[Circle]:
            return shape.kind == "circle"

        to_circle = Option.from_predicate(is_circle)
        assert to_circle(Circle(1)).map(lambda c: c.radius) == Present(1)
        assert to_circle(Square(2)) == Empty()


class TestTransformations:
    def test_map_on_present(self):
        assert Option.some("a").map(str.upper) == Present("A")

    def test_map_never_calls_mapper_on_empty(self):
        mapper = MagicMock()
        assert Option.none().map(mapper) == Empty()
        mapper.assert_not_called()

    def test_chain_flattens(self):
        inverse = lambda x: Option.none() if x == 0 else Option.some(1 / x)  # noqa: E731
        assert Option.some(5).chain(inverse) == Present(0.2)
        assert Option.some(0).chain(inverse) == Empty()

    def test_chain_never_calls_function_on_empty(self):
        stub = MagicMock()
        assert Option.none().chain(stub) == Empty()
        assert stub.call_count == 0

    def test_filter(self):
        assert Option.some(4).filter(_is_even) == Present(4)
        assert Option.some(5).filter(_is_even) == Empty()
        assert Option.none().filter(_is_even) == Empty()


class TestFolding:
    def test_match(self):
        assert Option.some(2).match(lambda: "none", lambda v: f"some {v}") == "some 2"
        assert Option.none().match(lambda: "none", lambda v: f"some {v}") == "none"

    def test_get_or_else(self):
        assert Option.some(0.5).get_or_else(lambda: 0) == 0.5
        assert Option.none().get_or_else(lambda: 0) == 0

    def test_get_or_else_widen(self):
        assert Option.none().get_or_else_widen(lambda: "string") == "string"

    def test_alt_uses_fallback_only_when_empty(self):
        fallback = MagicMock(return_value=Option.some("fallback"))
        assert Option.some("first").alt(fallback) == Present("first")
        fallback.assert_not_called()
        assert Option.none().alt(fallback) == Present("fallback")

    def test_to_result(self):
        assert Option.some(1).to_result(lambda: "missing") == Success(1)
        assert Option.none().to_result(lambda: "missing") == Failure("missing")

    def test_pattern_matching(self):
        match Option.some(7):
            case Present(v):
                assert v == 7
            case Empty():
                pytest.fail("Should be Present")


class TestPipeable:
    def test_pipeline(self):
        out = pipe(
            ["a", "b"],
            lambda titles: Option.some(titles[0]) if titles else Option.none(),
            option.map(str.upper),
            option.map(lambda t: f"Best - {t}"),
            option.get_or_else(lambda: "nothing"),
        )
        assert out == "Best - A"

    def test_module_factories(self):
        assert option.some(1) == Present(1)
        assert option.none() == Empty()
        assert option.from_nullable(None) == Empty()
        assert option.from_predicate(_is_even)(2) == Present(2)

    def test_pointfree_operators(self):
        assert option.chain(lambda x: Present(x + 1))(Present(1)) == Present(2)
        assert option.filter(_is_even)(Present(3)) == Empty()
        assert option.alt(lambda: Present("b"))(Empty()) == Present("b")
        assert option.get_or_else_widen(lambda: "x")(Empty()) == "x"
        assert option.match(lambda: 0, lambda v: v)(Present(9)) == 9
        assert option.to_result(lambda: "e")(Empty()) == Failure("e")


class TestValueSemantics:
    def test_all_empties_are_equal(self):
        assert Empty() == Option.none()

    def test_repr(self):
        assert repr(Present(1)) == "Present(1)"
        assert repr(Empty()) == "Empty()"

    def test_truthiness(self):
        assert Option.some(0)
        assert not Option.none()

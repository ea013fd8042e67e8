"""Unit tests for shapes — predicate narrowing and kind dispatch."""

from __future__ import annotations

import math

from fpkit import Option, ResultAssertions

from fp_primer.domain.models import Circle, Square
from fp_primer.shapes import circle_area, circle_from_shape, describe_shape, is_circle


class TestCircleFromShape:
    def test_circle_is_present(self) -> None:
        circle = Circle(radius=1)
        assert is_circle(circle)
        assert circle_from_shape(circle) == Option.some(circle)

    def test_square_is_empty(self) -> None:
        assert not is_circle(Square(side=2))
        ResultAssertions.assert_empty(circle_from_shape(Square(side=2)))


class TestCircleArea:
    def test_circle_area(self) -> None:
        area = ResultAssertions.assert_present(circle_area(Circle(radius=2)))
        assert area == math.pi * 4

    def test_square_has_no_circle_area(self) -> None:
        assert circle_area(Square(side=2)).is_empty()


class TestDescribeShape:
    def test_each_kind_has_a_description(self) -> None:
        assert describe_shape(Circle(radius=1)) == "circle of radius 1"
        assert describe_shape(Square(side=2)) == "square of side 2"

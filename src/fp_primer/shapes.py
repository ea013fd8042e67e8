"""
Shapes — narrowing a tagged union with a predicate.

is_circle() is a TypeGuard. When it is lifted with Option.from_predicate,
the result is typed Option[Circle], not Option[Shape], so the code after it
can read `.radius` without checking the tag again.
"""

from __future__ import annotations

import math
from typing import Callable, TypeGuard

from fpkit.dispatch import match_kind
from fpkit.option import Option

from fp_primer.domain.models import Circle, Shape


def is_circle(shape: Shape) -> TypeGuard[Circle]:
    return shape.kind == "circle"


circle_from_shape: Callable[[Shape], Option[Circle]] = Option.from_predicate(is_circle)


def circle_area(shape: Shape) -> Option[float]:
    return circle_from_shape(shape).map(lambda circle: math.pi * circle.radius**2)


describe_shape: Callable[[Shape], str] = match_kind(
    Shape,
    {
        "circle": lambda c: f"circle of radius {c.radius}",
        "square": lambda s: f"square of side {s.side}",
    },
)

"""Tests for pipeable sequence helpers."""

from __future__ import annotations

import operator

from fpkit import Empty, Present, pipe, seq


class TestHead:
    def test_empty_sequence(self):
        assert seq.head([]) == Empty()

    def test_first_element(self):
        assert seq.head([1, 2, 3]) == Present(1)

    def test_first_element_may_be_falsy(self):
        assert seq.head([0]) == Present(0)


class TestFolding:
    def test_zip_with_stops_at_shorter(self):
        assert seq.zip_with([4, 0, 7, 1])([1, 2, 3]) == ((1, 4), (2, 0), (3, 7))

    def test_map_returns_tuple(self):
        assert seq.map(str.upper)(["a", "b"]) == ("A", "B")

    def test_reduce_from_initial(self):
        assert seq.reduce(0, operator.add)([]) == 0
        assert seq.reduce(10, operator.add)([1, 2]) == 13

    def test_sum_of_pairwise_maxima(self):
        total = pipe(
            [1, 2, 3],
            seq.zip_with([4, 0, 7, 1]),
            seq.map(max),
            seq.reduce(0, operator.add),
        )
        assert total == 13

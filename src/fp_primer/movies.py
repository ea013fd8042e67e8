"""
Movies — choosing between independent optional highlights.

movie_highlight() tries the award highlight, then (through alt) the top-10
highlight, whatever the reason the first one was missing, and finally
falls back to the release year.
"""

from __future__ import annotations

from collections.abc import Sequence

from fpkit import option, seq
from fpkit.function import pipe
from fpkit.option import Option

from fp_primer.domain.models import Movie

TOP_RANKING = 10


def best_movie(titles: Sequence[str]) -> Option[str]:
    return pipe(
        titles,
        seq.head,
        option.map(str.upper),
        option.map(lambda title: f"Best - {title}"),
    )


def award_highlight(movie: Movie) -> Option[str]:
    return pipe(
        movie.award,
        Option.from_nullable,
        option.map(lambda award: f"Awarded with: {award}"),
    )


def top10_highlight(movie: Movie) -> Option[str]:
    return pipe(
        movie,
        Option.from_predicate(lambda m: m.rating_position <= TOP_RANKING),
        option.map(lambda m: f"In TOP 10 at position: {m.rating_position}"),
    )


def movie_highlight(movie: Movie) -> str:
    return pipe(
        movie,
        award_highlight,
        option.alt(lambda: top10_highlight(movie)),
        option.get_or_else(lambda: f"Released in {movie.release_year}"),
    )

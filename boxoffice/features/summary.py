"""Summary statistics over the working movie dataset."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from boxoffice.config import TOP_N_GENRES


class EmptyDatasetError(ZeroDivisionError):
    """No movies survived filtering, so there is nothing to summarize."""


@dataclass(frozen=True)
class SummaryStats:
    mean_box_office: float
    top_genres: list[str]
    date_range: tuple[pd.Timestamp, pd.Timestamp]


def _require_rows(movies: pd.DataFrame, what: str) -> None:
    if len(movies) == 0:
        raise EmptyDatasetError(f"Cannot compute {what} of an empty movie dataset")


def mean_box_office(movies: pd.DataFrame) -> float:
    """Arithmetic mean of the adjusted box office."""
    _require_rows(movies, "the mean box office")
    return float(movies["box_office"].sum() / len(movies))


def top_genres(movies: pd.DataFrame, n: int = TOP_N_GENRES) -> list[str]:
    """Most frequent genres, count descending.

    Ties keep the order in which genres first appear in the dataset:
    counts are collected in an insertion-ordered dict and sorted() is
    stable, including with reverse=True.
    """
    counts: dict[str, int] = {}
    for genre in movies["genre"]:
        counts[genre] = counts.get(genre, 0) + 1
    return sorted(counts, key=counts.get, reverse=True)[:n]


def _year_floor(ts: pd.Timestamp) -> pd.Timestamp:
    return pd.Timestamp(year=ts.year, month=1, day=1)


def _year_ceil(ts: pd.Timestamp) -> pd.Timestamp:
    floor = _year_floor(ts)
    if floor == ts:
        return floor
    return pd.Timestamp(year=ts.year + 1, month=1, day=1)


def date_range(movies: pd.DataFrame) -> tuple[pd.Timestamp, pd.Timestamp]:
    """Release date extent rounded outward to whole calendar years."""
    _require_rows(movies, "the date range")
    dates = movies["date"]
    return _year_floor(dates.min()), _year_ceil(dates.max())


def summarize(movies: pd.DataFrame) -> SummaryStats:
    """Compute mean box office, top genres and date range in one pass.

    Raises EmptyDatasetError for an empty dataset; an empty chart is not
    something we render.
    """
    _require_rows(movies, "summary statistics")
    return SummaryStats(
        mean_box_office=mean_box_office(movies),
        top_genres=top_genres(movies),
        date_range=date_range(movies),
    )

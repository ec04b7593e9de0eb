"""Per-movie area curves and genre colors for the chart."""

from __future__ import annotations

import pandas as pd

from boxoffice.config import CURVE_SPREAD_MONTHS, GENRE_COLORS, OTHER_GENRE_COLOR
from boxoffice.features.summary import EmptyDatasetError


def deviation_extent(movies: pd.DataFrame, mean: float) -> tuple[float, float]:
    """(min, max) of each movie's box office minus the mean."""
    if movies.empty:
        raise EmptyDatasetError("Cannot compute the deviation extent of an empty movie dataset")
    deviation = movies["box_office"] - mean
    return float(deviation.min()), float(deviation.max())


def curve_points(
    date: pd.Timestamp,
    deviation: float,
    spread_months: int = CURVE_SPREAD_MONTHS,
) -> list[tuple[pd.Timestamp, float]]:
    """A triangular peak: zero `spread_months` either side, `deviation` at release."""
    offset = pd.DateOffset(months=spread_months)
    return [
        (date - offset, 0.0),
        (date, float(deviation)),
        (date + offset, 0.0),
    ]


def build_curves(movies: pd.DataFrame, mean: float) -> pd.DataFrame:
    """One curve per movie, in dataset order.

    Returns DataFrame with columns:
        title, genre, deviation, dates, values
    """
    rows = []
    for _, row in movies.iterrows():
        deviation = row["box_office"] - mean
        points = curve_points(row["date"], deviation)
        rows.append({
            "title": row["title"],
            "genre": row["genre"],
            "deviation": float(deviation),
            "dates": [p[0] for p in points],
            "values": [p[1] for p in points],
        })
    return pd.DataFrame(rows, columns=["title", "genre", "deviation", "dates", "values"])


def genre_color_map(genres: list[str], colors: list[str] | None = None) -> dict[str, str]:
    """Pair the top genres with the palette, in order."""
    colors = colors or GENRE_COLORS
    return dict(zip(genres, colors))


def color_for(genre: str, mapping: dict[str, str]) -> str:
    return mapping.get(genre, OTHER_GENRE_COLOR)

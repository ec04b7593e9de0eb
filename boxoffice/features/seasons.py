"""Recurring release seasons highlighted behind the curves."""

from __future__ import annotations

import pandas as pd

from boxoffice.config import NUM_YEARS, START_YEAR

# season -> (start month, end month); the end is exclusive and wraps into
# the next year when it is not after the start
SEASON_WINDOWS: dict[str, tuple[int, int]] = {
    "summer": (5, 9),    # May 1 - Sep 1, summer blockbusters
    "winter": (11, 1),   # Nov 1 - Jan 1, holiday releases
}

BAND_COLUMNS = ["season", "start", "end"]


def seasonal_bands(start_year: int = START_YEAR, num_years: int = NUM_YEARS) -> pd.DataFrame:
    """Season bands for each year in [start_year, start_year + num_years).

    Returns DataFrame with columns season, start, end, sorted by start.
    """
    rows = []
    for year in range(start_year, start_year + num_years):
        for season, (start_month, end_month) in SEASON_WINDOWS.items():
            end_year = year if end_month > start_month else year + 1
            rows.append({
                "season": season,
                "start": pd.Timestamp(year=year, month=start_month, day=1),
                "end": pd.Timestamp(year=end_year, month=end_month, day=1),
            })

    bands = pd.DataFrame(rows, columns=BAND_COLUMNS)
    return bands.sort_values("start", kind="stable").reset_index(drop=True)

"""Shared fixtures for the box-office pipeline tests."""

import matplotlib

matplotlib.use("Agg")

import pandas as pd  # noqa: E402
import pytest  # noqa: E402


def identity_inflation(year, amount):
    return float(amount)


@pytest.fixture
def no_inflation():
    """Adjuster that leaves amounts unchanged, so expected values stay readable."""
    return identity_inflation


@pytest.fixture
def raw_records():
    return [
        {"Title": "Old Hit", "Year": "2005", "Released": "01 Jun 2005", "BoxOffice": "$500,000,000", "Genre": "Action"},
        {"Title": "Summer One", "Year": "2009", "Released": "01 Mar 2009", "BoxOffice": "$100", "Genre": "Action, Adventure"},
        {"Title": "No Gross", "Year": "2010", "Released": "10 Jan 2010", "BoxOffice": "N/A", "Genre": "Drama"},
        {"Title": "Zero Gross", "Year": "2010", "Released": "10 Feb 2010", "BoxOffice": "$0", "Genre": "Drama"},
        {"Title": "Winter Two", "Year": "2010", "Released": "15 Dec 2010", "BoxOffice": "$200", "Genre": "Comedy, Romance"},
        {"Title": "Bad Date", "Year": "2011", "Released": "N/A", "BoxOffice": "$300", "Genre": "Comedy"},
        {"Title": "Bad Year", "Year": "N/A", "Released": "01 May 2011", "BoxOffice": "$300", "Genre": "Comedy"},
        {"Title": "Late One", "Year": "2011", "Released": "20 Nov 2011", "BoxOffice": "$300", "Genre": " Animation , Family"},
    ]


def make_movies(genres=None, box_offices=None, dates=None) -> pd.DataFrame:
    """Build a working dataset directly, bypassing normalize()."""
    n = len(next(v for v in (genres, box_offices, dates) if v is not None))
    genres = genres or ["Drama"] * n
    box_offices = box_offices or [100.0] * n
    dates = dates or ["2010-06-01"] * n
    return pd.DataFrame({
        "title": [f"Movie {i}" for i in range(n)],
        "date": pd.to_datetime(dates),
        "year": [pd.Timestamp(d).year for d in dates],
        "genre": genres,
        "box_office": [float(b) for b in box_offices],
    })


@pytest.fixture
def movies_factory():
    return make_movies

"""Turn raw OMDb-style records into the working movie dataset."""

from __future__ import annotations

import math
import re

import pandas as pd

from boxoffice.config import REFERENCE_YEAR, START_YEAR
from boxoffice.data.inflation import Adjuster, make_adjuster
from boxoffice.data.movies import validate_records

COLUMNS = ["title", "date", "year", "genre", "box_office"]

_CURRENCY_AND_SEPARATORS = re.compile(r"[$€£¥,_\s]")
_LEADING_INT = re.compile(r"[+-]?\d+")

MIN_YEAR = 1
MAX_YEAR = 9999
# pd.to_datetime reads these as the current wall-clock time
_RELATIVE_DATES = {"now", "today"}


def _as_text(value) -> str | None:
    """Stringify a raw field; None and NaN (missing JSON keys) become None."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    return str(value).strip()


def parse_year(value) -> int | None:
    """Parse a numeric year string. Non-integral or non-numeric -> None."""
    text = _as_text(value)
    if not text:
        return None
    try:
        year = float(text)
    except ValueError:
        return None
    if not math.isfinite(year) or not year.is_integer():
        return None
    if not MIN_YEAR <= year <= MAX_YEAR:
        return None
    return int(year)


def parse_release_date(value) -> pd.Timestamp | None:
    """Parse a release date such as "16 Jul 2010" to a midnight timestamp."""
    text = _as_text(value)
    if not text or text.lower() in _RELATIVE_DATES:
        return None
    ts = pd.to_datetime(text, errors="coerce")
    if pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert(None)
    return ts.normalize()


def parse_box_office(value) -> int | None:
    """Parse "$1,234,567" to 1234567.

    Currency symbols and digit-group separators are stripped, then the
    leading integer is read ("12.5M" reads as 12). Zero and unparseable
    values mean there is no box office data and return None.
    """
    text = _as_text(value)
    if text is None:
        return None
    match = _LEADING_INT.match(_CURRENCY_AND_SEPARATORS.sub("", text))
    if match is None:
        return None
    try:
        amount = int(match.group())
        # must survive float arithmetic in the inflation adjuster
        float(amount)
    except (OverflowError, ValueError):
        return None
    return amount or None


def parse_genre(value) -> str:
    """Primary genre: everything before the first comma."""
    text = _as_text(value)
    if text is None:
        return ""
    return text.split(",")[0].strip()


def _to_frame(rows: list[dict]) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    df["year"] = df["year"].astype(int)
    df["box_office"] = df["box_office"].astype(float)
    return df


def normalize(
    raw_records,
    start_year: int = START_YEAR,
    reference_year: int | None = None,
    inflate: Adjuster | None = None,
) -> pd.DataFrame:
    """Build the working dataset from raw records.

    A record is kept only when its year and release date parse, its box
    office is a non-zero amount, the inflation-adjusted amount is positive
    and the year is >= start_year. Everything else is dropped silently.
    Input order is preserved.

    `inflate` maps (year, amount) to an adjusted amount; by default the
    CPI-U adjuster for `reference_year` (config REFERENCE_YEAR when None).

    Returns DataFrame with columns:
        title, date, year, genre, box_office
    """
    records = validate_records(raw_records)
    if inflate is None:
        inflate = make_adjuster(REFERENCE_YEAR if reference_year is None else reference_year)

    rows = []
    for record in records:
        year = parse_year(record.get("Year"))
        released = parse_release_date(record.get("Released"))
        amount = parse_box_office(record.get("BoxOffice"))
        if year is None or released is None or amount is None:
            continue

        box_office = float(inflate(year, amount))
        # NaN fails the comparison too
        if not box_office > 0 or math.isinf(box_office) or year < start_year:
            continue

        rows.append({
            "title": _as_text(record.get("Title")) or "",
            "date": released,
            "year": year,
            "genre": parse_genre(record.get("Genre")),
            "box_office": box_office,
        })

    return _to_frame(rows)

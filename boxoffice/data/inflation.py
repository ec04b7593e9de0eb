"""Inflation adjustment using the annual average CPI-U."""

from __future__ import annotations

from typing import Callable

# Annual average CPI-U, all items, U.S. city average (BLS series CUUR0000SA0).
CPI_U: dict[int, float] = {
    1990: 130.7,
    1991: 136.2,
    1992: 140.3,
    1993: 144.5,
    1994: 148.2,
    1995: 152.4,
    1996: 156.9,
    1997: 160.5,
    1998: 163.0,
    1999: 166.6,
    2000: 172.2,
    2001: 177.1,
    2002: 179.9,
    2003: 184.0,
    2004: 188.9,
    2005: 195.3,
    2006: 201.6,
    2007: 207.342,
    2008: 215.303,
    2009: 214.537,
    2010: 218.056,
    2011: 224.939,
    2012: 229.594,
    2013: 232.957,
    2014: 236.736,
    2015: 237.017,
    2016: 240.007,
    2017: 245.120,
    2018: 251.107,
    2019: 255.657,
    2020: 258.811,
    2021: 270.970,
    2022: 292.655,
    2023: 304.702,
    2024: 313.689,
}

FIRST_CPI_YEAR = min(CPI_U)
LAST_CPI_YEAR = max(CPI_U)

Adjuster = Callable[[int, float], float]


def cpi_for_year(year: int) -> float:
    """Look up the CPI for a year, clamping to the first/last published year."""
    year = min(max(int(year), FIRST_CPI_YEAR), LAST_CPI_YEAR)
    return CPI_U[year]


def inflate(year: int, amount: float, reference_year: int) -> float:
    """Express an amount from `year` in `reference_year` dollars."""
    return amount * cpi_for_year(reference_year) / cpi_for_year(year)


def make_adjuster(reference_year: int) -> Adjuster:
    """Bind the reference year, giving the (year, amount) adjuster normalize() takes."""
    def adjust(year: int, amount: float) -> float:
        return inflate(year, amount, reference_year)

    return adjust

"""Load the movie dataset, summarize it and draw the box-office chart.

Usage:
    python -m boxoffice.scripts.render_chart --input data/raw/movies.json --output output/box_office.png
"""

import argparse
import sys

import matplotlib
import matplotlib.pyplot as plt

from boxoffice.config import CHART_PATH, MOVIES_PATH, NUM_YEARS, REFERENCE_YEAR, START_YEAR
from boxoffice.data.movies import load_movies
from boxoffice.features.normalize import normalize
from boxoffice.features.seasons import seasonal_bands
from boxoffice.features.summary import summarize
from boxoffice.viz.chart import render_chart

matplotlib.use("Agg")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Draw inflation-adjusted box office by release date.")
    parser.add_argument("--input", default=str(MOVIES_PATH), help="JSON array of OMDb-style movie records")
    parser.add_argument("--output", default=str(CHART_PATH), help="chart file (.png, .svg, .pdf)")
    parser.add_argument("--start-year", type=int, default=START_YEAR, help="drop movies released before this year")
    parser.add_argument("--reference-year", type=int, default=REFERENCE_YEAR, help="express box office in this year's dollars")
    parser.add_argument("--num-years", type=int, default=NUM_YEARS, help="years of seasonal highlight bands")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    raw = load_movies(args.input)
    print(f"Loaded {len(raw)} raw records from {args.input}")

    movies = normalize(raw, start_year=args.start_year, reference_year=args.reference_year)
    print(f"Kept {len(movies)} movies from {args.start_year} on with box office data")
    if movies.empty:
        print("Error: no movies left after filtering, nothing to chart.", file=sys.stderr)
        return 1

    stats = summarize(movies)
    start, end = stats.date_range
    print(f"Mean box office ({args.reference_year} dollars): ${stats.mean_box_office:,.0f}")
    print(f"Top genres: {', '.join(stats.top_genres)}")
    print(f"Date range: {start.date()} - {end.date()}")

    bands = seasonal_bands(args.start_year, args.num_years)
    fig = render_chart(movies, stats, bands, output_path=args.output)
    plt.close(fig)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Draw the box-office deviation chart with matplotlib."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
import pandas as pd
from matplotlib.figure import Figure
from matplotlib.patches import Patch

from boxoffice.config import DPI, HEIGHT, HOLIDAY_COLORS, MARGIN, WIDTH
from boxoffice.features.curves import build_curves, color_for, deviation_extent, genre_color_map
from boxoffice.features.summary import EmptyDatasetError, SummaryStats

# hatch patterns stand in for the textured season overlays
SEASON_HATCHES = {
    "summer": "////",
    "winter": "\\\\\\\\",
}


def _millions(x, _pos) -> str:
    return f"${x / 1e6:,.0f}M"


def _draw_bands(ax, bands: pd.DataFrame) -> None:
    for band in bands.itertuples(index=False):
        ax.axvspan(
            band.start.to_pydatetime(),
            band.end.to_pydatetime(),
            facecolor="none",
            edgecolor=HOLIDAY_COLORS[band.season],
            hatch=SEASON_HATCHES.get(band.season),
            linewidth=0,
            alpha=0.35,
            zorder=0,
        )


def _draw_curves(ax, movies: pd.DataFrame, stats: SummaryStats) -> None:
    colors = genre_color_map(stats.top_genres)
    curves = build_curves(movies, stats.mean_box_office)
    for curve in curves.itertuples(index=False):
        ax.fill_between(
            [d.to_pydatetime() for d in curve.dates],
            0,
            curve.values,
            color=color_for(curve.genre, colors),
            alpha=0.6,
            linewidth=0,
            zorder=2,
        )


def _annotate_top_movie(ax, movies: pd.DataFrame, mean: float) -> None:
    top = movies.loc[movies["box_office"].idxmax()]
    ax.annotate(
        f"{top['title']}\n{_millions(top['box_office'], None)}",
        xy=(top["date"].to_pydatetime(), top["box_office"] - mean),
        xytext=(20, -10),
        textcoords="offset points",
        fontsize=8,
        arrowprops={"arrowstyle": "-", "color": "#555555", "linewidth": 0.8},
        zorder=4,
    )


def _legend_handles(stats: SummaryStats) -> list[Patch]:
    colors = genre_color_map(stats.top_genres)
    handles = [Patch(facecolor=color, label=genre) for genre, color in colors.items()]
    for season, color in HOLIDAY_COLORS.items():
        handles.append(Patch(
            facecolor="none",
            edgecolor=color,
            hatch=SEASON_HATCHES.get(season),
            label=f"{season} releases",
        ))
    return handles


def render_chart(
    movies: pd.DataFrame,
    stats: SummaryStats,
    bands: pd.DataFrame,
    output_path: Path | str | None = None,
) -> Figure:
    """Render the chart and optionally save it (format from the file suffix)."""
    if movies.empty:
        raise EmptyDatasetError("Nothing to chart: the movie dataset is empty")

    fig, ax = plt.subplots(figsize=(WIDTH / DPI, HEIGHT / DPI), dpi=DPI)
    fig.subplots_adjust(
        left=MARGIN["left"] / WIDTH,
        right=1 - MARGIN["right"] / WIDTH,
        top=1 - MARGIN["top"] / HEIGHT,
        bottom=MARGIN["bottom"] / HEIGHT,
    )

    _draw_bands(ax, bands)
    _draw_curves(ax, movies, stats)
    ax.axhline(0, color="#999999", linewidth=0.8, zorder=3)
    _annotate_top_movie(ax, movies, stats.mean_box_office)

    start, end = stats.date_range
    ax.set_xlim(start.to_pydatetime(), end.to_pydatetime())
    low, high = deviation_extent(movies, stats.mean_box_office)
    if low == high:
        # single movie or identical grosses
        low, high = low - 1.0, high + 1.0
    ax.set_ylim(low, high)

    ax.yaxis.set_major_formatter(mticker.FuncFormatter(_millions))
    ax.set_xlabel("Release date")
    ax.set_ylabel("Box office vs. mean (adjusted)")
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)
    ax.legend(handles=_legend_handles(stats), loc="upper left", frameon=False, fontsize=8, ncol=2)

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, bbox_inches="tight")
        print(f"Saved chart to {output_path}")

    return fig

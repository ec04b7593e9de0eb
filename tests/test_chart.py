"""Smoke tests for the matplotlib chart."""

import importlib

import matplotlib
import matplotlib.pyplot as plt
import pandas as pd
import pytest

from boxoffice.features.seasons import seasonal_bands
from boxoffice.features.summary import EmptyDatasetError, summarize
from boxoffice.viz import chart
from boxoffice.viz.chart import render_chart


@pytest.fixture
def movies(movies_factory):
    return movies_factory(
        genres=["Action", "Comedy", "Action", "Western"],
        box_offices=[100e6, 200e6, 600e6, 50e6],
        dates=["2009-03-01", "2010-12-15", "2011-07-04", "2012-05-01"],
    )


def test_render_sets_limits_from_stats(movies):
    stats = summarize(movies)
    fig = render_chart(movies, stats, seasonal_bands(2009, 4))
    try:
        ax = fig.axes[0]
        low, high = ax.get_ylim()
        assert low == pytest.approx(50e6 - stats.mean_box_office)
        assert high == pytest.approx(600e6 - stats.mean_box_office)

        legend_labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert legend_labels == ["Action", "Comedy", "Western", "summer releases", "winter releases"]
        assert ax.get_xlabel() == "Release date"

        annotations = [child for child in ax.texts if child.get_text().startswith(movies.loc[2, "title"])]
        assert len(annotations) == 1
    finally:
        plt.close(fig)


def test_render_writes_file(tmp_path, movies):
    output = tmp_path / "charts" / "box_office.png"
    fig = render_chart(movies, summarize(movies), seasonal_bands(2009, 4), output_path=output)
    plt.close(fig)

    assert output.exists()
    assert output.stat().st_size > 0


def test_single_movie_renders(movies_factory):
    movies = movies_factory(genres=["Drama"], box_offices=[10e6], dates=["2015-06-19"])
    fig = render_chart(movies, summarize(movies), seasonal_bands(2015, 1))
    plt.close(fig)


def test_empty_dataset_is_rejected(movies):
    stats = summarize(movies)
    with pytest.raises(EmptyDatasetError):
        render_chart(movies.iloc[0:0], stats, pd.DataFrame(columns=["season", "start", "end"]))


def test_import_leaves_backend_alone(monkeypatch):
    calls = []
    monkeypatch.setattr(matplotlib, "use", lambda *args, **kwargs: calls.append(args))
    importlib.reload(chart)

    assert calls == []

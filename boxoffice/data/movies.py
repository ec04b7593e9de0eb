"""Load the raw OMDb-style movie dataset."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from boxoffice.config import MOVIES_PATH


class MalformedDatasetError(TypeError):
    """The dataset is not a sequence of movie records."""


def validate_records(raw_records) -> list[Mapping]:
    """Check the dataset's shape and return it as a list.

    Individual field values are not checked here; bad values are dropped
    later by normalize(). Only the container shape is fatal.
    """
    if isinstance(raw_records, (str, bytes, Mapping)):
        raise MalformedDatasetError(
            f"Expected a sequence of records, got {type(raw_records).__name__}"
        )
    try:
        records = list(raw_records)
    except TypeError as exc:
        raise MalformedDatasetError(
            f"Expected a sequence of records, got {type(raw_records).__name__}"
        ) from exc

    for i, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise MalformedDatasetError(
                f"Record {i} is a {type(record).__name__}, not an object"
            )
    return records


def load_movies(path: Path | str = MOVIES_PATH) -> list[dict]:
    """Load the full movie dataset from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"{path} not found. Set BOXOFFICE_MOVIES_PATH or pass --input."
        )

    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise MalformedDatasetError(f"{path} is not valid JSON: {exc}") from exc

    return validate_records(data)

"""CSV loading for the census dataset.

This module reads the comma-separated data file into an immutable tuple of
:class:`~census_scatter.models.data_types.Record` objects. Only the
``poverty`` and ``healthcare`` columns are coerced to numbers; any other
column besides ``state`` and ``abbr`` is ignored.
"""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import Iterable, Tuple

from census_scatter.config.chart_config import DataLoadError, MissingColumnError
from census_scatter.models.data_types import Record


logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: Tuple[str, ...] = ("state", "abbr", "poverty", "healthcare")

Dataset = Tuple[Record, ...]


def coerce_number(text: str | None) -> float:
    """Coerce a CSV cell to a float.

    Blank or missing cells become ``0.0`` and anything unparseable becomes NaN. No
    error is raised: a NaN value simply yields a NaN pixel position later.

    Parameters
    ----------
    text:
        Raw cell text (``None`` when the row is shorter than the header, read as blank).
    """
    stripped = (text or "").strip()
    if not stripped:
        return 0.0

    try:
        return float(stripped)
    except ValueError:
        logger.debug(f"Could not coerce {text!r} to a number, using NaN")
        return math.nan


def _check_header(fieldnames: Iterable[str] | None, source: str) -> None:
    """Raise MissingColumnError if any required column is absent."""
    present = {name.strip() for name in (fieldnames or [])}
    missing = [col for col in REQUIRED_COLUMNS if col not in present]
    if missing:
        raise MissingColumnError(
            f"{source} is missing required column(s): {', '.join(missing)}"
        )


def parse_rows(lines: Iterable[str], source: str = "<data>") -> Dataset:
    """Parse CSV text lines (header first) into a dataset.

    Raises
    ------
    MissingColumnError
        If the header lacks ``state``, ``abbr``, ``poverty`` or ``healthcare``.
    DataLoadError
        If the CSV itself is malformed.
    """
    try:
        reader = csv.DictReader(lines, skipinitialspace=True)
        _check_header(reader.fieldnames, source)

        records = []
        for row in reader:
            row = {(key or "").strip(): value for key, value in row.items()}
            records.append(
                Record(
                    state=(row.get("state") or "").strip(),
                    abbr=(row.get("abbr") or "").strip(),
                    poverty=coerce_number(row.get("poverty")),
                    healthcare=coerce_number(row.get("healthcare")),
                )
            )
    except csv.Error as exc:
        raise DataLoadError(f"Malformed CSV in {source}: {exc}") from exc

    return tuple(records)


def load_dataset(csv_path: str | Path) -> Dataset:
    """Load the census dataset from a CSV file.

    Parameters
    ----------
    csv_path:
        Path to a comma-separated file with a header row.

    Returns
    -------
    tuple of Record
        Records in file order.

    Raises
    ------
    DataLoadError
        If the file cannot be read or parsed (``MissingColumnError`` for a
        header without the required columns).
    """
    path = Path(csv_path)
    logger.info(f"Loading dataset from {path}")

    try:
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            dataset = parse_rows(f, source=str(path))
    except DataLoadError:
        raise
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"Could not read data file '{path}': {exc}") from exc

    logger.info(f"Loaded {len(dataset)} records")
    return dataset

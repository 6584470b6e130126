"""
Synthetic census dataset generator for census-scatter.

Usage (from the project root):
    python -m scripts.generate_dataset [--rows N] [--seed S] [--output PATH]

Writes a CSV with the columns the chart needs (state, abbr, poverty,
healthcare) plus an extra ``age`` column that the loader ignores. Values are
random and only meant for demos and smoke tests.
"""

from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path
from typing import Any, Dict, List

import numpy as np


PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_OUTPUT = PROJECT_ROOT / "data" / "synthetic_census.csv"

FIELDNAMES = ["id", "state", "abbr", "poverty", "age", "healthcare"]

STATES = [
    ("Alabama", "AL"), ("Alaska", "AK"), ("Arizona", "AZ"), ("Arkansas", "AR"),
    ("California", "CA"), ("Colorado", "CO"), ("Connecticut", "CT"), ("Delaware", "DE"),
    ("District of Columbia", "DC"), ("Florida", "FL"), ("Georgia", "GA"), ("Hawaii", "HI"),
    ("Idaho", "ID"), ("Illinois", "IL"), ("Indiana", "IN"), ("Iowa", "IA"),
    ("Kansas", "KS"), ("Kentucky", "KY"), ("Louisiana", "LA"), ("Maine", "ME"),
    ("Maryland", "MD"), ("Massachusetts", "MA"), ("Michigan", "MI"), ("Minnesota", "MN"),
    ("Mississippi", "MS"), ("Missouri", "MO"), ("Montana", "MT"), ("Nebraska", "NE"),
    ("Nevada", "NV"), ("New Hampshire", "NH"), ("New Jersey", "NJ"), ("New Mexico", "NM"),
    ("New York", "NY"), ("North Carolina", "NC"), ("North Dakota", "ND"), ("Ohio", "OH"),
    ("Oklahoma", "OK"), ("Oregon", "OR"), ("Pennsylvania", "PA"), ("Rhode Island", "RI"),
    ("South Carolina", "SC"), ("South Dakota", "SD"), ("Tennessee", "TN"), ("Texas", "TX"),
    ("Utah", "UT"), ("Vermont", "VT"), ("Virginia", "VA"), ("Washington", "WA"),
    ("West Virginia", "WV"), ("Wisconsin", "WI"), ("Wyoming", "WY"),
]


def generate_rows(num_rows: int = len(STATES), seed: int | None = None) -> List[Dict[str, Any]]:
    """Random census rows, one per state, in alphabetical order.

    Healthcare loosely tracks poverty so the chart shows a trend.
    """
    if not 0 < num_rows <= len(STATES):
        raise ValueError(f"num_rows must be between 1 and {len(STATES)}, got {num_rows}")

    rng = np.random.default_rng(seed)
    poverty = rng.uniform(low=9.0, high=22.0, size=num_rows).round(1)
    noise = rng.normal(loc=0.0, scale=2.0, size=num_rows)
    healthcare = np.clip(0.6 * poverty + noise, 3.0, 25.0).round(1)
    age = rng.uniform(low=30.0, high=45.0, size=num_rows).round(1)

    rows: List[Dict[str, Any]] = []
    for i, (state, abbr) in enumerate(STATES[:num_rows]):
        rows.append(
            {
                "id": i + 1,
                "state": state,
                "abbr": abbr,
                "poverty": float(poverty[i]),
                "age": float(age[i]),
                "healthcare": float(healthcare[i]),
            }
        )
    return rows


def write_dataset(rows: List[Dict[str, Any]], output_path: Path) -> Path:
    """Write rows to CSV with a header."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(rows)
    return output_path


def main(argv: List[str] | None = None) -> int:
    """Entry point for the generator CLI."""
    parser = argparse.ArgumentParser(description="Generate a synthetic census CSV")
    parser.add_argument("--rows", type=int, default=len(STATES), help="Number of states to include")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--output", type=str, default=str(DEFAULT_OUTPUT), help="Output CSV path")
    args = parser.parse_args(argv)

    try:
        rows = generate_rows(args.rows, seed=args.seed)
        path = write_dataset(rows, Path(args.output))
    except (ValueError, OSError) as exc:
        print(f"Failed to generate dataset: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {len(rows)} rows to {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

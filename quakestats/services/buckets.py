# File: quakestats/services/buckets.py

"""
Fixed range tables for magnitude and depth.

Every range is half-open [lower, upper): a value sitting exactly on a
threshold belongs to the range above it, so magnitude 1.0 counts as
"1 to 2" and depth 20.0 as "Above 20 km". The same tables drive both the
in-memory counting (numpy.digitize) and the SQL CASE expression, which
keeps the two data sources in agreement.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

import numpy as np
from sqlalchemy import case
from sqlalchemy.sql.elements import ColumnElement


@dataclass(frozen=True)
class BucketScheme:
    name: str
    # Ascending thresholds; len(labels) == len(thresholds) + 1
    thresholds: Tuple[float, ...]
    labels: Tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.labels) != len(self.thresholds) + 1:
            raise ValueError(f"{self.name}: need exactly one more label than thresholds")
        if list(self.thresholds) != sorted(self.thresholds):
            raise ValueError(f"{self.name}: thresholds must be ascending")

    def classify(self, value: float) -> str:
        idx = int(np.digitize(value, self.thresholds, right=False))
        return self.labels[idx]

    def count(self, values: Iterable[float]) -> Dict[str, int]:
        arr = np.fromiter(values, dtype=float)
        idx = np.digitize(arr, self.thresholds, right=False)
        counts = np.bincount(idx, minlength=len(self.labels))
        return {label: int(n) for label, n in zip(self.labels, counts)}

    def empty(self) -> Dict[str, int]:
        return {label: 0 for label in self.labels}

    def case_expression(self, column: ColumnElement) -> ColumnElement:
        """
        SQL CASE equivalent of classify(): first threshold the value is below wins.
        """
        whens = [
            (column < threshold, label)
            for threshold, label in zip(self.thresholds, self.labels)
        ]
        return case(*whens, else_=self.labels[-1])


MAGNITUDE_BUCKETS = BucketScheme(
    name="magnitude",
    thresholds=(1.0, 2.0, 3.0, 4.0, 5.0),
    labels=("Below 1", "1 to 2", "2 to 3", "3 to 4", "4 to 5", "Above 5"),
)

DEPTH_BUCKETS = BucketScheme(
    name="depth",
    thresholds=(5.0, 10.0, 15.0, 20.0),
    labels=("0-5 km", "5-10 km", "10-15 km", "15-20 km", "Above 20 km"),
)


def classify_magnitude(magnitude: float) -> str:
    return MAGNITUDE_BUCKETS.classify(magnitude)


def classify_depth(depth: float) -> str:
    return DEPTH_BUCKETS.classify(depth)

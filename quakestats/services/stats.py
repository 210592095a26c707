# File: quakestats/services/stats.py

"""
Descriptive statistics shown next to each chart.
"""

from typing import Dict, Sequence

import numpy as np

from quakestats.schemas.chart import DistributionStats, ScatterStats
from quakestats.schemas.earthquake import MagnitudeDepthPoint


def summarize_distribution(distribution: Dict[str, int], title: str) -> DistributionStats:
    if not distribution:
        return DistributionStats(title=title, total=0, categories=0, most_common=None, highest_count=0)

    labels = list(distribution.keys())
    counts = np.fromiter(distribution.values(), dtype=np.int64)

    # argmax returns the first maximum, so ties go to the earlier range
    top = int(np.argmax(counts))

    return DistributionStats(
        title=title,
        total=int(counts.sum()),
        categories=len(labels),
        most_common=labels[top],
        highest_count=int(counts[top]),
    )


def _round(value: float) -> float:
    return round(float(value), 2)


def summarize_scatter(points: Sequence[MagnitudeDepthPoint]) -> ScatterStats:
    if not points:
        return ScatterStats(data_points=0)

    magnitudes = np.array([p.magnitude for p in points], dtype=float)
    depths = np.array([p.depth for p in points], dtype=float)

    return ScatterStats(
        data_points=len(points),
        avg_magnitude=_round(magnitudes.mean()),
        max_magnitude=_round(magnitudes.max()),
        avg_depth=_round(depths.mean()),
        max_depth=_round(depths.max()),
    )

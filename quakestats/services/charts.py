# File: quakestats/services/charts.py

"""
Chart payloads for the browser client.

The client picks one of four visualizations; each maps to a dataset from
the quake source, a renderer (pie, bar or scatter) and the summary block
shown beside the chart. D3 on the client only has to draw what it gets.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from quakestats.schemas.chart import CategoryItem, ChartResponse
from quakestats.services.quake_source import QuakeSource
from quakestats.services.stats import summarize_distribution, summarize_scatter


class VizType(str, Enum):
    pie = "pie"
    bar = "bar"
    scatter = "scatter"
    depth_bar = "depthBar"


MAGNITUDE_TITLE = "Earthquake Magnitude Distribution"
DEPTH_TITLE = "Earthquake Depth Distribution"
SCATTER_TITLE = "Earthquake Magnitude vs Depth"


def category_series(distribution: Dict[str, int]) -> List[CategoryItem]:
    total = sum(distribution.values())
    return [
        CategoryItem(
            label=label,
            value=value,
            percent=round(value / total * 100, 1) if total else 0.0,
        )
        for label, value in distribution.items()
    ]


def build_chart(viz_type: VizType, source: QuakeSource, *, limit: int) -> ChartResponse:
    if viz_type is VizType.scatter:
        points = source.magnitude_vs_depth(limit)
        return ChartResponse(
            viz_type=viz_type.value,
            renderer="scatter",
            title=SCATTER_TITLE,
            x_label="Magnitude",
            y_label="Depth (km)",
            series=points,
            stats=summarize_scatter(points),
        )

    if viz_type is VizType.depth_bar:
        distribution = source.depth_distribution()
        title, stats_title = DEPTH_TITLE, "Depth Distribution"
    else:
        distribution = source.magnitude_distribution()
        title, stats_title = MAGNITUDE_TITLE, "Magnitude Distribution"

    renderer = "pie" if viz_type is VizType.pie else "bar"
    return ChartResponse(
        viz_type=viz_type.value,
        renderer=renderer,
        title=title,
        x_label=None if renderer == "pie" else "Category",
        y_label=None if renderer == "pie" else "Count",
        series=category_series(distribution),
        stats=summarize_distribution(distribution, stats_title),
    )

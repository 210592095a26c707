# File: quakestats/schemas/chart.py

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel

from quakestats.schemas.earthquake import MagnitudeDepthPoint


# -----------------------------
# Summary blocks shown beside a chart
# -----------------------------

class DistributionStats(BaseModel):
    title: str
    total: int
    categories: int
    most_common: Optional[str] = None
    highest_count: int


class ScatterStats(BaseModel):
    data_points: int
    avg_magnitude: Optional[float] = None
    max_magnitude: Optional[float] = None
    avg_depth: Optional[float] = None
    max_depth: Optional[float] = None


# -----------------------------
# Chart payload
# -----------------------------

class CategoryItem(BaseModel):
    label: str
    value: int
    percent: float


class ChartResponse(BaseModel):
    viz_type: str
    renderer: str
    title: str
    x_label: Optional[str] = None
    y_label: Optional[str] = None
    series: Union[List[CategoryItem], List[MagnitudeDepthPoint]]
    stats: Union[DistributionStats, ScatterStats]

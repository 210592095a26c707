# File: quakestats/api/v1/routes_quakes.py

from typing import List

from fastapi import APIRouter, Depends, Query

from quakestats.api.deps import get_quake_source
from quakestats.api.errors import database_errors
from quakestats.core.config import settings
from quakestats.schemas.earthquake import EarthquakeRead, MagnitudeDepthPoint
from quakestats.services.quake_source import QuakeSource

router = APIRouter(tags=["quakes"])


@router.get("/magnitude-vs-depth", response_model=List[MagnitudeDepthPoint])
def magnitude_vs_depth(
    limit: int = Query(settings.scatter_default_limit, ge=1, le=settings.max_query_limit),
    source: QuakeSource = Depends(get_quake_source),
):
    """
    Magnitude/depth pairs of the newest events, for the scatter plot.
    """
    with database_errors("magnitude vs depth"):
        return source.magnitude_vs_depth(limit)


@router.get("/recent-quakes", response_model=List[EarthquakeRead])
def recent_quakes(
    limit: int = Query(settings.recent_default_limit, ge=1, le=settings.max_query_limit),
    source: QuakeSource = Depends(get_quake_source),
):
    with database_errors("recent quakes"):
        return source.recent_quakes(limit)

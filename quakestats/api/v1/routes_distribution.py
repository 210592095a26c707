# File: quakestats/api/v1/routes_distribution.py

"""
Bucketed counts for the pie and bar charts.
"""

from typing import Dict

from fastapi import APIRouter, Depends

from quakestats.api.deps import get_quake_source
from quakestats.api.errors import database_errors
from quakestats.services.quake_source import QuakeSource

router = APIRouter(tags=["distribution"])


@router.get("/magnitude-distribution", response_model=Dict[str, int])
def magnitude_distribution(source: QuakeSource = Depends(get_quake_source)):
    """
    Count of events per magnitude range, every range present.
    """
    with database_errors("magnitude distribution"):
        return source.magnitude_distribution()


@router.get("/depth-distribution", response_model=Dict[str, int])
def depth_distribution(source: QuakeSource = Depends(get_quake_source)):
    with database_errors("depth distribution"):
        return source.depth_distribution()

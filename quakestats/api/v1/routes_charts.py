# File: quakestats/api/v1/routes_charts.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from quakestats.api.deps import get_quake_source
from quakestats.api.errors import database_errors
from quakestats.core.config import settings
from quakestats.schemas.chart import ChartResponse
from quakestats.services.charts import VizType, build_chart
from quakestats.services.quake_source import QuakeSource

router = APIRouter(tags=["charts"])


@router.get("/charts/{viz_type}", response_model=ChartResponse)
def chart(
    viz_type: VizType,
    limit: Optional[int] = Query(None),
    source: QuakeSource = Depends(get_quake_source),
):
    """
    Everything the client needs to draw one visualization.

    `limit` only affects the scatter plot and is ignored otherwise.
    """
    if viz_type is VizType.scatter:
        if limit is None:
            limit = settings.scatter_default_limit
        elif not 1 <= limit <= settings.max_query_limit:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"limit must be between 1 and {settings.max_query_limit}",
            )
    else:
        limit = settings.scatter_default_limit

    with database_errors(f"{viz_type.value} chart"):
        return build_chart(viz_type, source, limit=limit)

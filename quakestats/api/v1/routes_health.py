# File: quakestats/api/v1/routes_health.py

from datetime import datetime, timezone

from fastapi import APIRouter

from quakestats.core.config import settings
from quakestats.schemas.earthquake import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        data_source=settings.resolved_data_source,
    )

from fastapi import APIRouter

from quakestats.api.v1.routes_charts import router as charts_router
from quakestats.api.v1.routes_distribution import router as distribution_router
from quakestats.api.v1.routes_health import router as health_router
from quakestats.api.v1.routes_quakes import router as quakes_router


api_router = APIRouter()

api_router.include_router(distribution_router)
api_router.include_router(quakes_router)
api_router.include_router(charts_router)
api_router.include_router(health_router)

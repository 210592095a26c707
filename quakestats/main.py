# quakestats/main.py

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from quakestats.core.config import settings
from quakestats.core.logging_config import configure_logging
from quakestats.api.v1.api import api_router
from quakestats.db.init_db import init_db, seed_initial_data
from quakestats.db.session import check_connection, get_engine, get_sessionmaker

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def prepare_database() -> None:
    """
    Check the connection and, if allowed, create and seed the table.

    Failures are logged only; requests will answer 500 until the database
    comes back.
    """
    try:
        engine = get_engine()
    except SQLAlchemyError:
        logger.exception("Cannot build a database engine")
        return

    if not check_connection(engine):
        return

    if not settings.db_seed_sample:
        return

    try:
        init_db(engine)
        db = get_sessionmaker()()
        try:
            seed_initial_data(db)
        finally:
            db.close()
    except SQLAlchemyError:
        logger.exception("Database setup failed, serving without seeding")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Serving earthquake data from the %s source", settings.resolved_data_source)
    if settings.resolved_data_source == "database":
        prepare_database()
    yield


def create_application() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # ---------- STATIC FILES ----------
    # Browser client: index.html, js/, css/
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)

    index_html = (STATIC_DIR / "index.html").read_text(encoding="utf-8")
    # The client reads the API prefix from <meta name="api-prefix">
    index_html = index_html.replace("__API_PREFIX__", settings.api_prefix)

    @app.get("/", include_in_schema=False, response_class=HTMLResponse)
    def index():
        return index_html

    return app


app = create_application()


if __name__ == "__main__":
    logger.info("Visit http://localhost:%d to view the application", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)

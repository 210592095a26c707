# File: quakestats/core/config.py

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from sqlalchemy.engine import URL

DATA_SOURCES = ("memory", "database")

# SQLAlchemy driver names and default ports per supported dialect
DIALECT_DRIVERS = {
    "postgresql": ("postgresql+psycopg", 5432, "postgres"),
    "mysql": ("mysql+pymysql", 3306, "root"),
}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = "Quake Stats API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[str] = os.getenv("CORS_ORIGINS", "*")

    # "memory" serves the bundled sample dataset, "database" queries the earthquakes table
    data_source: Optional[str] = os.getenv("QUAKE_DATA_SOURCE") or None

    # Database
    database_url: Optional[str] = os.getenv("DATABASE_URL") or None
    db_dialect: str = os.getenv("DB_DIALECT", "postgresql")
    db_host: Optional[str] = os.getenv("DB_HOST") or None
    db_port: Optional[int] = int(os.getenv("DB_PORT")) if os.getenv("DB_PORT") else None
    db_name: str = os.getenv("DB_NAME", "earthquakes")
    db_user: Optional[str] = os.getenv("DB_USER") or None
    db_password: Optional[str] = os.getenv("DB_PASSWORD") or None
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "10"))
    db_ssl: bool = _env_bool("DB_SSL", False)
    db_seed_sample: bool = _env_bool("DB_SEED_SAMPLE", True)
    sqlite_path: str = os.getenv("SQLITE_PATH", "./earthquakes.db")

    # Query limits
    scatter_default_limit: int = 100
    recent_default_limit: int = 50
    max_query_limit: int = int(os.getenv("MAX_QUERY_LIMIT", "1000"))

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("db_dialect")
    @classmethod
    def check_dialect(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in DIALECT_DRIVERS:
            raise ValueError(f"Unsupported DB_DIALECT {v!r}, expected one of {sorted(DIALECT_DRIVERS)}")
        return v

    @field_validator("data_source")
    @classmethod
    def check_data_source(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip().lower()
        if v not in DATA_SOURCES:
            raise ValueError(f"Unsupported QUAKE_DATA_SOURCE {v!r}, expected one of {DATA_SOURCES}")
        return v

    @property
    def resolved_data_source(self) -> str:
        """
        Explicit QUAKE_DATA_SOURCE wins; otherwise use the database only
        when some connection details were configured.
        """
        if self.data_source:
            return self.data_source
        if self.database_url or self.db_host:
            return "database"
        return "memory"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        if not self.db_host:
            return f"sqlite:///{self.sqlite_path}"

        driver, default_port, default_user = DIALECT_DRIVERS[self.db_dialect]
        url = URL.create(
            drivername=driver,
            username=self.db_user or default_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port or default_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

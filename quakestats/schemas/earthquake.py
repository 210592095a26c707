# File: quakestats/schemas/earthquake.py

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class EarthquakeBase(BaseModel):
    magnitude: float
    depth: float
    latitude: float
    longitude: float
    timestamp: datetime


class EarthquakeRead(EarthquakeBase):
    id: int

    class Config:
        from_attributes = True


class MagnitudeDepthPoint(BaseModel):
    magnitude: float
    depth: float
    id: int

    class Config:
        from_attributes = True


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    data_source: str

# File: quakestats/models/earthquake.py

"""
Earthquake model.

One row per recorded event. The API only ever reads this table; rows are
created by the sample seeding in quakestats.db.init_db or by whatever
external process owns the catalogue.
"""

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from quakestats.models.base import Base


class Earthquake(Base):
    __tablename__ = "earthquakes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    magnitude: Mapped[float] = mapped_column(Float, nullable=False)

    # Hypocentre depth in km
    depth: Mapped[float] = mapped_column(Float, nullable=False)

    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)

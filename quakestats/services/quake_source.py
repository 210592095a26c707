# File: quakestats/services/quake_source.py

"""
Read-side access to earthquake records.

Two sources answer the same questions:

  - InMemoryQuakeSource: a list of records (the bundled sample by default),
    aggregated in Python.
  - SqlQuakeSource: the earthquakes table, aggregated by the database with
    GROUP BY over the bucket CASE expression.

Routes never care which one they get; see quakestats.api.deps.get_quake_source.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from quakestats.models.earthquake import Earthquake
from quakestats.schemas.earthquake import EarthquakeRead, MagnitudeDepthPoint
from quakestats.services.buckets import DEPTH_BUCKETS, MAGNITUDE_BUCKETS, BucketScheme
from quakestats.services.sample_data import sample_quakes


class QuakeSource:
    """
    Interface shared by the in-memory and SQL sources.
    """

    name = "abstract"

    def magnitude_distribution(self) -> Dict[str, int]:
        raise NotImplementedError

    def depth_distribution(self) -> Dict[str, int]:
        raise NotImplementedError

    def magnitude_vs_depth(self, limit: int) -> List[MagnitudeDepthPoint]:
        raise NotImplementedError

    def recent_quakes(self, limit: int) -> List[EarthquakeRead]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError


class InMemoryQuakeSource(QuakeSource):
    name = "memory"

    def __init__(self, records: Optional[Sequence[EarthquakeRead]] = None):
        if records is None:
            records = sample_quakes()
        # Newest first, matching ORDER BY timestamp DESC on the SQL side
        self._records = sorted(records, key=lambda r: (r.timestamp, r.id), reverse=True)

    def magnitude_distribution(self) -> Dict[str, int]:
        return MAGNITUDE_BUCKETS.count(r.magnitude for r in self._records)

    def depth_distribution(self) -> Dict[str, int]:
        return DEPTH_BUCKETS.count(r.depth for r in self._records)

    def magnitude_vs_depth(self, limit: int) -> List[MagnitudeDepthPoint]:
        return [
            MagnitudeDepthPoint(magnitude=r.magnitude, depth=r.depth, id=r.id)
            for r in self._records[:limit]
        ]

    def recent_quakes(self, limit: int) -> List[EarthquakeRead]:
        return list(self._records[:limit])

    def count(self) -> int:
        return len(self._records)


class SqlQuakeSource(QuakeSource):
    name = "database"

    def __init__(self, db: Session):
        self.db = db

    def _distribution(self, scheme: BucketScheme, column) -> Dict[str, int]:
        # Bucket in a subquery so GROUP BY targets a plain column on every dialect
        bucketed = select(scheme.case_expression(column).label("bucket")).subquery()
        stmt = select(bucketed.c.bucket, func.count()).group_by(bucketed.c.bucket)

        counts = scheme.empty()
        for bucket, n in self.db.execute(stmt):
            counts[bucket] = int(n)
        return counts

    def magnitude_distribution(self) -> Dict[str, int]:
        return self._distribution(MAGNITUDE_BUCKETS, Earthquake.magnitude)

    def depth_distribution(self) -> Dict[str, int]:
        return self._distribution(DEPTH_BUCKETS, Earthquake.depth)

    def magnitude_vs_depth(self, limit: int) -> List[MagnitudeDepthPoint]:
        stmt = (
            select(Earthquake.magnitude, Earthquake.depth, Earthquake.id)
            .order_by(Earthquake.timestamp.desc(), Earthquake.id.desc())
            .limit(limit)
        )
        return [
            MagnitudeDepthPoint(magnitude=magnitude, depth=depth, id=quake_id)
            for magnitude, depth, quake_id in self.db.execute(stmt)
        ]

    def recent_quakes(self, limit: int) -> List[EarthquakeRead]:
        stmt = (
            select(Earthquake)
            .order_by(Earthquake.timestamp.desc(), Earthquake.id.desc())
            .limit(limit)
        )
        return [EarthquakeRead.model_validate(row) for row in self.db.scalars(stmt)]

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(Earthquake)) or 0

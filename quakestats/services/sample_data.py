# File: quakestats/services/sample_data.py

"""
Fallback dataset served when no database is configured.

Ten small Central California events, also used to seed an empty
earthquakes table.
"""

from datetime import datetime
from typing import List

from quakestats.schemas.earthquake import EarthquakeRead

SAMPLE_QUAKE_ROWS = [
    (1, 0.5, 5.2, 35.5, -120.3, "2024-11-01 10:23:45"),
    (2, 1.2, 8.5, 36.1, -121.0, "2024-11-01 11:15:30"),
    (3, 2.1, 10.3, 35.8, -120.7, "2024-11-01 12:45:22"),
    (4, 1.8, 6.7, 36.3, -121.5, "2024-11-01 14:20:10"),
    (5, 3.2, 15.1, 35.2, -119.8, "2024-11-01 15:30:55"),
    (6, 0.8, 4.2, 36.5, -120.2, "2024-11-01 16:10:30"),
    (7, 2.5, 12.8, 35.7, -121.2, "2024-11-02 08:45:15"),
    (8, 1.5, 7.3, 36.2, -120.9, "2024-11-02 09:22:40"),
    (9, 4.1, 18.5, 35.4, -120.5, "2024-11-02 10:55:20"),
    (10, 1.1, 5.8, 36.0, -121.1, "2024-11-02 12:15:45"),
]


def sample_quakes() -> List[EarthquakeRead]:
    return [
        EarthquakeRead(
            id=quake_id,
            magnitude=magnitude,
            depth=depth,
            latitude=lat,
            longitude=lon,
            timestamp=datetime.strptime(ts, "%Y-%m-%d %H:%M:%S"),
        )
        for quake_id, magnitude, depth, lat, lon, ts in SAMPLE_QUAKE_ROWS
    ]

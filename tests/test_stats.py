# File: tests/test_stats.py

from quakestats.schemas.earthquake import MagnitudeDepthPoint
from quakestats.services.stats import summarize_distribution, summarize_scatter


def test_summarize_distribution_first_max_wins():
    stats = summarize_distribution({"low": 3, "mid": 3, "high": 1}, "Test")
    assert stats.total == 7
    assert stats.categories == 3
    assert stats.most_common == "low"
    assert stats.highest_count == 3


def test_summarize_empty_distribution():
    stats = summarize_distribution({}, "Empty")
    assert stats.total == 0
    assert stats.most_common is None
    assert stats.highest_count == 0


def test_summarize_scatter_rounds_to_two_places():
    points = [
        MagnitudeDepthPoint(magnitude=1.0, depth=3.333, id=1),
        MagnitudeDepthPoint(magnitude=2.0, depth=6.667, id=2),
        MagnitudeDepthPoint(magnitude=2.5, depth=10.0, id=3),
    ]
    stats = summarize_scatter(points)
    assert stats.data_points == 3
    assert stats.avg_magnitude == 1.83
    assert stats.max_magnitude == 2.5
    assert stats.avg_depth == 6.67
    assert stats.max_depth == 10.0


def test_summarize_scatter_without_points():
    stats = summarize_scatter([])
    assert stats.data_points == 0
    assert stats.max_depth is None

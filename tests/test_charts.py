# File: tests/test_charts.py

import pytest
from fastapi.testclient import TestClient

from quakestats.main import app
from quakestats.services.charts import VizType, build_chart, category_series
from quakestats.services.quake_source import InMemoryQuakeSource

client = TestClient(app)


def test_pie_chart_payload():
    resp = client.get("/api/charts/pie")
    assert resp.status_code == 200
    chart = resp.json()

    assert chart["renderer"] == "pie"
    assert chart["title"] == "Earthquake Magnitude Distribution"
    assert chart["x_label"] is None
    assert [item["percent"] for item in chart["series"]] == [20.0, 40.0, 20.0, 10.0, 10.0, 0.0]
    assert chart["stats"] == {
        "title": "Magnitude Distribution",
        "total": 10,
        "categories": 6,
        "most_common": "1 to 2",
        "highest_count": 4,
    }


def test_depth_bar_chart_payload():
    chart = client.get("/api/charts/depthBar").json()

    assert chart["renderer"] == "bar"
    assert chart["title"] == "Earthquake Depth Distribution"
    assert (chart["x_label"], chart["y_label"]) == ("Category", "Count")
    assert chart["series"][0] == {"label": "0-5 km", "value": 1, "percent": 10.0}
    assert chart["stats"]["most_common"] == "5-10 km"


def test_bar_and_pie_share_magnitude_data():
    pie = client.get("/api/charts/pie").json()
    bar = client.get("/api/charts/bar").json()
    assert pie["series"] == bar["series"]
    assert bar["renderer"] == "bar"


def test_scatter_chart_uses_limit():
    chart = client.get("/api/charts/scatter", params={"limit": 2}).json()

    assert chart["renderer"] == "scatter"
    assert (chart["x_label"], chart["y_label"]) == ("Magnitude", "Depth (km)")
    assert [p["id"] for p in chart["series"]] == [10, 9]
    assert chart["stats"]["data_points"] == 2
    assert chart["stats"]["max_magnitude"] == 4.1


def test_scatter_stats_over_whole_sample():
    stats = client.get("/api/charts/scatter").json()["stats"]
    assert stats["data_points"] == 10
    assert stats["avg_magnitude"] == pytest.approx(1.88)
    assert stats["avg_depth"] == pytest.approx(9.44)
    assert stats["max_depth"] == 18.5


def test_unknown_viz_type_rejected():
    assert client.get("/api/charts/histogram").status_code == 422


def test_limit_ignored_outside_scatter():
    for viz_type in ("pie", "bar", "depthBar"):
        resp = client.get(f"/api/charts/{viz_type}", params={"limit": 0})
        assert resp.status_code == 200
        assert resp.json()["stats"]["total"] == 10


def test_scatter_limit_out_of_range():
    assert client.get("/api/charts/scatter", params={"limit": 0}).status_code == 422
    assert client.get("/api/charts/scatter", params={"limit": 1_000_000}).status_code == 422
    assert client.get("/api/charts/scatter", params={"limit": "many"}).status_code == 422


def test_empty_source_charts():
    source = InMemoryQuakeSource(records=[])

    pie = build_chart(VizType.pie, source, limit=100)
    assert all(item.percent == 0.0 for item in pie.series)
    assert pie.stats.total == 0

    scatter = build_chart(VizType.scatter, source, limit=100)
    assert scatter.series == []
    assert scatter.stats.avg_magnitude is None


def test_category_series_percent_rounding():
    items = category_series({"a": 1, "b": 2})
    assert [i.percent for i in items] == [33.3, 66.7]

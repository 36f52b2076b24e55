"""Health endpoints — aggregated report, tag filtering and HTTP status mapping.

Invariants:
    - 200 when Healthy or Degraded, 503 when any check is Unhealthy
    - /health/{tag} only runs the checks carrying that tag
    - Unknown tag returns 404
"""

from blackslope.api import health as health_api
from blackslope.core.health import HealthCheckRegistration, HealthStatus


async def test_health_all_checks_healthy(client, seeded_movies):
    res = await client.get("/health")

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "Healthy"
    entries = {e["key"]: e for e in body["details"]}
    assert set(entries) == {"MOVIES.DB", "MOVIES.API"}
    assert entries["MOVIES.API"]["description"] == "3 movies available"


async def test_health_empty_table_is_degraded_but_200(client):
    res = await client.get("/health")

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "Degraded"
    api_entry = next(e for e in body["details"] if e["key"] == "MOVIES.API")
    assert api_entry["value"] == "Degraded"


async def test_health_by_tag_filters_checks(client, seeded_movies):
    res = await client.get("/health/database")

    assert res.status_code == 200
    assert [e["key"] for e in res.json()["details"]] == ["MOVIES.DB"]


async def test_health_movies_tag_runs_every_check(client, seeded_movies):
    res = await client.get("/health/movies")

    assert [e["key"] for e in res.json()["details"]] == ["MOVIES.DB", "MOVIES.API"]


async def test_health_unknown_tag_returns_404(client):
    res = await client.get("/health/cache")

    assert res.status_code == 404
    assert res.json()["errors"][0]["code"] == 404


async def test_health_unhealthy_check_returns_503(client, monkeypatch):
    async def broken(db):
        raise ConnectionError("database unreachable")

    monkeypatch.setattr(
        health_api,
        "HEALTH_CHECKS",
        [HealthCheckRegistration(name="MOVIES.DB", check=broken, tags=("movies", "database"))],
    )

    res = await client.get("/health")

    assert res.status_code == 503
    body = res.json()
    assert body["status"] == HealthStatus.UNHEALTHY.value
    assert body["details"][0]["exception"].startswith("ConnectionError")

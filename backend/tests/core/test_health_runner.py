"""Health runner — status aggregation, timeouts and failure capture."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from blackslope.core.health import (
    HealthCheckRegistration,
    HealthEntry,
    HealthStatus,
    aggregate_status,
    run_health_checks,
)


def _entry(status):
    return HealthEntry(key="X", value=status, duration=0.0)


@pytest.mark.parametrize(
    "statuses, expected",
    [
        ([], HealthStatus.HEALTHY),
        ([HealthStatus.HEALTHY, HealthStatus.HEALTHY], HealthStatus.HEALTHY),
        ([HealthStatus.HEALTHY, HealthStatus.DEGRADED], HealthStatus.DEGRADED),
        ([HealthStatus.DEGRADED, HealthStatus.UNHEALTHY], HealthStatus.UNHEALTHY),
    ],
)
def test_aggregate_status_is_worst_status(statuses, expected):
    assert aggregate_status([_entry(s) for s in statuses]) == expected


async def test_failing_check_is_unhealthy():
    async def failing(db):
        raise RuntimeError("down")

    report = await run_health_checks([HealthCheckRegistration("A", failing, ("api",))], db=AsyncMock())

    assert report.status == HealthStatus.UNHEALTHY
    assert report.details[0].exception == "RuntimeError: down"


async def test_slow_check_times_out():
    async def slow(db):
        await asyncio.sleep(1)
        return HealthStatus.HEALTHY, None

    report = await run_health_checks([HealthCheckRegistration("SLOW", slow)], db=AsyncMock(), timeout_s=0.01)

    assert report.details[0].value == HealthStatus.UNHEALTHY
    assert report.details[0].description == "Health check timed out"


async def test_tag_filter_selects_matching_checks():
    async def ok(db):
        return HealthStatus.HEALTHY, None

    registrations = [
        HealthCheckRegistration("DB", ok, ("database",)),
        HealthCheckRegistration("API", ok, ("api",)),
    ]

    report = await run_health_checks(registrations, db=AsyncMock(), tag="api")

    assert [e.key for e in report.details] == ["API"]


async def test_failed_check_rolls_back_before_next_check():
    db = AsyncMock()
    rollbacks_seen = []

    async def failing(session):
        raise RuntimeError("current transaction is aborted")

    async def next_check(session):
        rollbacks_seen.append(session.rollback.await_count)
        return HealthStatus.HEALTHY, None

    report = await run_health_checks(
        [HealthCheckRegistration("DB", failing), HealthCheckRegistration("API", next_check)], db,
    )

    assert rollbacks_seen == [1]
    assert [e.value for e in report.details] == [HealthStatus.UNHEALTHY, HealthStatus.HEALTHY]


async def test_healthy_checks_do_not_roll_back():
    db = AsyncMock()

    async def ok(session):
        return HealthStatus.HEALTHY, None

    await run_health_checks([HealthCheckRegistration("DB", ok)], db)

    db.rollback.assert_not_awaited()


async def test_rollback_failure_does_not_hide_the_report():
    db = AsyncMock()
    db.rollback.side_effect = ConnectionError("connection lost")

    async def failing(session):
        raise RuntimeError("down")

    report = await run_health_checks([HealthCheckRegistration("DB", failing)], db)

    assert report.status == HealthStatus.UNHEALTHY

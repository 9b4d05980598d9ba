"""Integration tests for the analytics endpoints."""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool


TASKS = [
    {
        "id": "1",
        "text": "Ship release",
        "completed": True,
        "completedAt": "2024-01-10T09:00:00",
        "createdAt": "2024-01-08T09:00:00",
        "priority": "high",
        "actualMinutes": 40,
        "estimatedMinutes": 30,
    },
    {
        "id": "2",
        "text": "Pay invoice",
        "completed": False,
        "dueDate": "2024-01-09T00:00:00",
        "createdAt": "2024-01-05T09:00:00",
    },
]


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_health_ready_reports_stored_profiles(client, test_engine, monkeypatch):
    monkeypatch.setattr("tasklens.database.engine", test_engine)
    resp = await client.get("/health/ready")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ready", "streak_store": "ok", "profiles": 0}

    await client.post("/api/v1/streaks/recompute", json={"tasks": [], "today": "2024-01-10"})
    resp = await client.get("/health/ready")
    assert resp.json()["profiles"] == 1


@pytest.mark.asyncio
async def test_health_ready_without_streak_table(client, monkeypatch):
    bare = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    monkeypatch.setattr("tasklens.database.engine", bare)
    try:
        resp = await client.get("/health/ready")
    finally:
        await bare.dispose()
    assert resp.status_code == 503
    assert resp.json()["status"] == "not_ready"


@pytest.mark.asyncio
async def test_day_metrics(client):
    resp = await client.post(
        "/api/v1/analytics/metrics",
        json={
            "tasks": TASKS,
            "mode": "day",
            "referenceDate": "2024-01-10T00:00:00",
            "now": "2024-01-10T12:00:00",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["dateRange"]["label"] == "Wednesday, Jan 10"
    metrics = body["metrics"]
    assert metrics["completedCount"] == 1
    assert metrics["pendingCount"] == 0
    assert metrics["overdueCount"] == 1
    assert metrics["productivityScore"] == 100
    assert metrics["totalTimeTrackedMinutes"] == 40
    assert metrics["priorityBreakdown"]["high"] == {"completed": 1, "total": 1}
    assert [t["id"] for t in metrics["recentCompletions"]] == ["1"]


@pytest.mark.asyncio
async def test_week_metrics_with_legacy_mode_name(client):
    resp = await client.post(
        "/api/v1/analytics/metrics",
        json={
            "tasks": TASKS,
            "mode": "weekly",
            "referenceDate": "2024-01-10T00:00:00",
            "now": "2024-01-10T12:00:00",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["dateRange"]["mode"] == "week"
    assert body["dateRange"]["label"] == "Week of Jan 7"
    assert body["metrics"]["totalInRange"] == 2
    assert body["metrics"]["pendingCount"] == 1


@pytest.mark.asyncio
async def test_metrics_rejects_unknown_mode(client):
    resp = await client.post("/api/v1/analytics/metrics", json={"tasks": [], "mode": "month"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_navigate_next_then_prev(client):
    start = "2024-01-10T08:00:00"
    nxt = await client.post(
        "/api/v1/analytics/navigate",
        json={"mode": "week", "referenceDate": start, "direction": "next"},
    )
    assert nxt.status_code == 200
    assert nxt.json()["dateRange"]["label"] == "Week of Jan 14"

    back = await client.post(
        "/api/v1/analytics/navigate",
        json={"mode": "week", "referenceDate": nxt.json()["referenceDate"], "direction": "prev"},
    )
    assert back.json()["referenceDate"] == start
    assert back.json()["dateRange"]["label"] == "Week of Jan 7"


@pytest.mark.asyncio
async def test_metrics_skips_record_without_id(client):
    resp = await client.post(
        "/api/v1/analytics/metrics",
        json={
            "tasks": TASKS + [{"text": "no id", "completed": True}],
            "mode": "day",
            "referenceDate": "2024-01-10T00:00:00",
            "now": "2024-01-10T12:00:00",
        },
    )
    assert resp.status_code == 200
    metrics = resp.json()["metrics"]
    assert metrics["completedCount"] == 1
    assert metrics["overdueCount"] == 1

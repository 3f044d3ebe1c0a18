"""Health Probes: liveness and readiness.

Tests cover:
    - Liveness always 200
    - Readiness 503 without an initialized database, 200 with one
    - Readiness 200 for the memory backend
"""

from weather_api.config import get_settings
from weather_api.core.domain_types import RepositoryBackend
import weather_api.infrastructure.database as db_module


async def test_liveness_returns_200(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "weather-api"


async def test_readiness_returns_503_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    res = await client.get("/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_returns_200_with_database(client, monkeypatch, tmp_path):
    manager = db_module.DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'ready.db'}",
    )
    monkeypatch.setattr(db_module, "db_manager", manager)

    res = await client.get("/health/ready")

    await manager.dispose()
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_is_ready_for_memory_backend(client, monkeypatch):
    monkeypatch.setattr(
        get_settings(), "repository_backend", RepositoryBackend.MEMORY,
    )

    res = await client.get("/health/ready")

    assert res.status_code == 200
    assert res.json()["checks"]["repository"] == "memory"

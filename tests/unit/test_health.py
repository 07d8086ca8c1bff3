"""Unit tests for health endpoints."""

import re
from unittest.mock import AsyncMock

from vidshare.services.storage import SQLiteRepository


class TestHealthEndpoint:
    def test_health_returns_expected_keys(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "git_sha" in data
        assert "build_date" in data
        assert re.match(r"\d+\.\d+\.\d+", data["app_version"])

    def test_health_returns_git_sha_from_env(self, client, monkeypatch):
        monkeypatch.setenv("GIT_SHA", "abc123def456")

        response = client.get("/api/health")

        assert response.json()["git_sha"] == "abc123def456"

    def test_health_returns_unknown_when_no_env(self, client, monkeypatch):
        monkeypatch.delenv("GIT_SHA", raising=False)

        response = client.get("/api/health")

        assert response.json()["git_sha"] == "unknown"


class TestReadyEndpoint:
    def test_ready_when_database_reachable(self, client):
        response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "checks": {"database": "ok"}}

    def test_degraded_when_database_fails(self, client, monkeypatch):
        monkeypatch.setattr(
            SQLiteRepository, "ping", AsyncMock(side_effect=RuntimeError("no such file"))
        )

        response = client.get("/api/ready")

        data = response.json()
        assert data["status"] == "degraded"
        assert data["checks"]["database"] == "error: no such file"

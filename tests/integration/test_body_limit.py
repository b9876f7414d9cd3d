"""Regression tests for RequestBodyLimitMiddleware."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from clashyaml.api.app import create_app
from clashyaml.api.deps import reset_dependencies
from clashyaml.settings import Settings


@pytest.fixture
def app():
    application = create_app(settings=Settings())
    yield application
    reset_dependencies()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


class TestBodyLimits:
    async def test_oversized_document_rejected(self, client: AsyncClient) -> None:
        payload = "x" * (5 * 1024 * 1024 + 1)
        response = await client.post(
            "/validate", content=payload, headers={"content-type": "application/json"}
        )
        assert response.status_code == 413
        assert "5 MB" in response.json()["detail"]

    async def test_default_limit_for_other_paths(self, client: AsyncClient) -> None:
        payload = "x" * (1024 * 1024 + 1)
        response = await client.post("/health", content=payload)
        assert response.status_code == 413
        assert "1 MB" in response.json()["detail"]

    async def test_document_under_limit_passes(self, client: AsyncClient) -> None:
        text = "rules:\n" + "  - MATCH,DIRECT\n" * 70_000
        response = await client.post("/highlight", json={"text": text})
        assert response.status_code == 200
        assert len(response.json()["spans"]) == 70_001

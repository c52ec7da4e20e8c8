"""
グローバルなテストフィクスチャと設定
"""
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from app.main import app


# HTTPクライアントのフィクスチャ
@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """テスト用HTTPクライアント"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sync_client() -> TestClient:
    """同期テスト用クライアント"""
    return TestClient(app)


@pytest.fixture
def openapi_schema(sync_client: TestClient) -> dict:
    """生成されたOpenAPIドキュメント"""
    response = sync_client.get("/api-doc/openapi.json")
    assert response.status_code == 200
    return response.json()

import pytest
from typing import Any, Dict
from httpx import AsyncClient, Response


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    resp: Response = await client.get("/health")
    body: Dict[str, Any] = resp.json()
    assert resp.status_code == 200
    assert body["status"] == "ok"


@pytest.mark.asyncio
async def test_version(client: AsyncClient) -> None:
    resp: Response = await client.get("/version")
    assert resp.status_code == 200
    assert resp.json()["version"]

"""REST tests for /calculators."""

import pytest
from typing import Any, Dict, List
from freezegun import freeze_time
from httpx import AsyncClient, Response

from health_tools.app import app
from health_tools.infrastructure.clock import get_today


@pytest.mark.asyncio
async def test_list_calculators(client: AsyncClient) -> None:
    resp: Response = await client.get("/calculators")
    body: List[Dict[str, Any]] = resp.json()
    assert resp.status_code == 200
    names = [item["name"] for item in body]
    assert "bmi" in names
    assert "due_date" in names
    assert all(item["description"] for item in body)


@pytest.mark.asyncio
async def test_bmi(client: AsyncClient) -> None:
    resp: Response = await client.post("/calculators/bmi", json={"weight": 70, "height": 175})
    body: Dict[str, Any] = resp.json()
    assert resp.status_code == 200
    assert body["bmi"] == 22.9
    assert body["category"] == "normal"


@pytest.mark.asyncio
async def test_bmi_imperial(client: AsyncClient) -> None:
    payload = {
        "weight": 176,
        "weight_unit": "lb",
        "height": 5,
        "height_unit": "ft_in",
        "height_inches": 10,
    }
    resp: Response = await client.post("/calculators/bmi", json=payload)
    assert resp.status_code == 200
    assert resp.json()["bmi"] == 25.3


@pytest.mark.asyncio
async def test_field_errors(client: AsyncClient) -> None:
    resp: Response = await client.post("/calculators/bmi", json={"weight": 10})
    body: Dict[str, Any] = resp.json()
    assert resp.status_code == 422
    assert set(body["errors"]) == {"weight", "height"}


@pytest.mark.asyncio
async def test_unknown_tag(client: AsyncClient) -> None:
    payload = {"method": "calipers", "gender": "male", "age": 30}
    resp: Response = await client.post("/calculators/body_fat", json=payload)
    assert resp.status_code == 422
    assert "method" in resp.json()["errors"]


@pytest.mark.asyncio
async def test_unknown_calculator(client: AsyncClient) -> None:
    resp: Response = await client.post("/calculators/bmx", json={})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Unknown calculator: 'bmx'"


@pytest.mark.asyncio
async def test_due_date_uses_reference_date(client: AsyncClient) -> None:
    resp: Response = await client.post(
        "/calculators/due_date", json={"last_period_date": "2024-01-01"}
    )
    body: Dict[str, Any] = resp.json()
    assert resp.status_code == 200
    assert body["due_date"] == "2024-10-07"
    assert body["gestational_age"] == {"weeks": 8, "days": 4, "total_days": 60}


@pytest.mark.asyncio
async def test_future_date_rejected(client: AsyncClient) -> None:
    resp: Response = await client.post(
        "/calculators/ovulation", json={"last_period_date": "2024-03-02"}
    )
    assert resp.status_code == 422
    assert resp.json()["errors"] == {
        "last_period_date": "Last period date cannot be in the future"
    }


@pytest.mark.asyncio
async def test_sleep(client: AsyncClient) -> None:
    resp: Response = await client.post(
        "/calculators/sleep", json={"mode": "bedtime", "target_time": "07:00"}
    )
    body: Dict[str, Any] = resp.json()
    assert resp.status_code == 200
    assert body["recommended_times"][0]["time"] == "23:15"


@pytest.mark.asyncio
async def test_due_date_follows_server_clock(client: AsyncClient) -> None:
    app.dependency_overrides.pop(get_today, None)
    with freeze_time("2024-07-08", real_asyncio=True):
        resp: Response = await client.post(
            "/calculators/due_date", json={"last_period_date": "2024-01-01"}
        )
    body: Dict[str, Any] = resp.json()
    assert resp.status_code == 200
    assert body["gestational_age"]["weeks"] == 27
    assert body["trimester"] == 3

"""HTTP fixtures: the full app over an in-memory ASGI transport."""

from datetime import date
from typing import Any, AsyncIterator, Iterator, cast

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from health_tools.app import app
from health_tools.infrastructure.clock import get_today

FIXED_TODAY = date(2024, 3, 1)


@pytest.fixture(autouse=True)
def _fixed_today() -> Iterator[None]:
    """Pin the reference date for date-dependent calculators."""
    app.dependency_overrides[get_today] = lambda: FIXED_TODAY
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_today, None)


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI

from health_tools.api.calculators import router as calculators_router
from health_tools.application.registry import CALCULATORS
from health_tools.infrastructure.config import get_app_version
from health_tools.infrastructure.logging_config import configure_logging

configure_logging()

APP_VERSION = get_app_version()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:  # pragma: no cover
    logger.info("lifespan.startup", version=APP_VERSION, calculators=len(CALCULATORS))
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="Health Tools Hub",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.include_router(calculators_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}

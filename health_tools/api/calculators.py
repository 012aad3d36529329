"""REST endpoints for running calculators on raw form values."""

from datetime import date
from typing import Any, Dict, List

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException, Path
from fastapi.responses import JSONResponse

from health_tools.application.registry import CALCULATORS, get_calculator
from health_tools.domain.shared import CalculatorNotFoundError, InputValidationError
from health_tools.infrastructure.clock import get_today

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/calculators", tags=["calculators"])


@router.get("")
async def list_calculators() -> List[Dict[str, Any]]:
    return [
        {"name": entry.name, "description": entry.description, "dated": entry.dated}
        for entry in CALCULATORS.values()
    ]


@router.post("/{name}", response_model=None)
async def run(
    name: str = Path(..., description="Registered calculator name"),
    payload: Dict[str, Any] = Body(..., description="Raw form values"),
    today: date = Depends(get_today),
) -> Any:
    """Validate the raw values and return the calculation result.

    Returns 422 with ``{"errors": {field: message}}`` when the input is
    rejected, 404 for an unknown calculator.
    """
    try:
        entry = get_calculator(name)
    except CalculatorNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    try:
        result = entry.execute(payload, today)
    except InputValidationError as exc:
        logger.info("calculator.rejected", calculator=name, fields=sorted(exc.field_errors))
        return JSONResponse(status_code=422, content={"errors": exc.field_errors})

    logger.debug("calculator.completed", calculator=name)
    return result.model_dump(mode="json")

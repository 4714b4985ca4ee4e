"""Endpoints dispatching compact/format/validate to registered validators."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from natid.core.exceptions import CleaningError, ValidatorNotFoundError
from natid.core.protocols import IValidator
from natid.models.result import InvalidResult, ValidatorInfo, ValidResult

router = APIRouter(tags=["validators"])


def get_validator(key: str, request: Request) -> IValidator:
    """Resolve the path key against the application registry."""
    registry = request.app.state.registry
    try:
        return registry.get(key)
    except ValidatorNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/validators")
async def list_validators(request: Request) -> list[ValidatorInfo]:
    """Return metadata for every exposed validator."""
    return request.app.state.registry.describe()


@router.get("/validators/{key}/validate")
async def validate_number(
    number: str = Query(..., description="Raw identifier, separators allowed"),
    validator: IValidator = Depends(get_validator),
) -> ValidResult | InvalidResult:
    return validator.validate(number)


@router.get("/validators/{key}/compact")
async def compact_number(
    number: str = Query(...),
    validator: IValidator = Depends(get_validator),
):
    try:
        return {"compact": validator.compact(number)}
    except CleaningError as exc:
        return JSONResponse(status_code=422, content={"error": exc.kind, "message": exc.message})


@router.get("/validators/{key}/format")
async def format_number(
    number: str = Query(...),
    validator: IValidator = Depends(get_validator),
) -> dict[str, str]:
    return {"formatted": validator.format(number)}

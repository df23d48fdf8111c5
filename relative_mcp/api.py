"""HTTP API for relative-mcp.

A read-only FastAPI sub-app exposing the comparison engine to clients that
don't speak MCP. Mounted at /v1 by the server entrypoint.
"""

from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Query

from relative_mcp.services.comparison_service import (
    QueryContext,
    entry_to_dict,
    list_reachable_entries,
    result_to_dict,
    run_query,
)
from relative_mcp.services.override_service import get_session_overrides
from relative_mcp.services.unit_definitions import UnknownUnitError, get_supported_units

router = APIRouter()


@router.get("/compare")
def compare(
    value: float = Query(..., description="Numeric value of the quantity"),
    unit: str = Query(..., description="Unit id or name, e.g. GW"),
) -> dict[str, Any]:
    context = QueryContext(
        input_number=value,
        unit_id=unit,
        factor_overrides=get_session_overrides().snapshot(),
    )
    try:
        results = run_query(context)
    except UnknownUnitError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return {
        "value": value,
        "unit": unit,
        "results": [result_to_dict(result, context) for result in results],
    }


@router.get("/reachable/{unit_id}")
def reachable(unit_id: str) -> dict[str, Any]:
    try:
        items = list_reachable_entries(unit_id)
    except UnknownUnitError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return {
        "unit": unit_id,
        "entries": [
            {"path_id": item.path_id, "path_name": item.path_name, "entry": entry_to_dict(item.entry)}
            for item in items
        ],
    }


@router.get("/units")
def units() -> dict[str, list[str]]:
    return get_supported_units()


api_app = FastAPI(title="relative-mcp api")
api_app.include_router(router)

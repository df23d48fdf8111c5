"""Comparison tools for relative-mcp.

Turns a quantity into human-scale comparisons as MCP tools.
"""

import json
from typing import Any

from mcp.types import Tool, TextContent

from relative_mcp.services.comparison_service import (
    QueryContext,
    entry_to_dict,
    list_reachable_entries,
    result_to_dict,
    run_query,
)
from relative_mcp.services.override_service import get_session_overrides


COMPARE_TOOLS: list[Tool] = [
    Tool(
        name="compare_quantity",
        description=(
            "Compare a quantity (value + unit) against real-world reference entries. "
            "Returns one comparison per path: a direct same-dimension comparison "
            "(e.g. '1 GW is 1 × nuclear reactor') and one per cross-dimension rule "
            "(electricity cost, EV driving distance, aluminum smelting, household time, "
            "and running time for power/energy). Each result has a sentence, a count, "
            "an icon layout and the alternatives that could be chosen instead."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "value": {
                    "type": "number",
                    "description": "Numeric value of the quantity.",
                },
                "unit": {
                    "type": "string",
                    "description": "Unit id or name (e.g., 'GW', 'kWh', 'km', 'USD', 'gigawatts').",
                },
                "factor_overrides": {
                    "type": "object",
                    "additionalProperties": {"type": "number"},
                    "description": "Optional rule_id -> factor overrides for this call only.",
                },
                "entry_overrides": {
                    "type": "object",
                    "additionalProperties": {"type": "string"},
                    "description": "Optional path_id -> entry_id choices ('direct' or a rule id).",
                },
            },
            "required": ["value", "unit"],
        },
    ),
    Tool(
        name="compare_reachable",
        description=(
            "List every reference entry a quantity in the given unit can be compared "
            "against, grouped by comparison path. Useful for picking entry_overrides."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "unit": {
                    "type": "string",
                    "description": "Unit id or name (e.g., 'GW', 'kWh').",
                },
            },
            "required": ["unit"],
        },
    ),
]


async def handle_compare_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle execution of comparison tools."""
    if name == "compare_quantity":
        return await _compare_quantity(arguments)
    elif name == "compare_reachable":
        return await _compare_reachable(arguments)
    else:
        return [TextContent(type="text", text=f"Unknown compare tool: {name}")]


def _string_map(value: Any) -> dict[str, Any] | None:
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(isinstance(k, str) for k in value):
        return None
    return value


async def _compare_quantity(args: dict[str, Any]) -> list[TextContent]:
    """Compare a quantity against reference entries."""
    value = args.get("value")
    unit = args.get("unit")

    if value is None or unit is None:
        return [TextContent(type="text", text='{"error": "value and unit are required"}')]

    if not isinstance(unit, str):
        return [TextContent(type="text", text='{"error": "unit must be a string"}')]

    try:
        value = float(value)
    except (TypeError, ValueError):
        return [TextContent(type="text", text='{"error": "value must be a number"}')]

    factor_overrides = _string_map(args.get("factor_overrides"))
    entry_overrides = _string_map(args.get("entry_overrides"))
    if factor_overrides is None or entry_overrides is None:
        return [TextContent(type="text", text='{"error": "overrides must be objects keyed by id"}')]

    # Per-call factors win over the session's.
    factors = dict(get_session_overrides().snapshot())
    factors.update(factor_overrides)

    try:
        context = QueryContext(
            input_number=value,
            unit_id=unit,
            factor_overrides=factors,
            entry_overrides={k: str(v) for k, v in entry_overrides.items()},
        )
        results = run_query(context)
    except ValueError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]

    return [TextContent(type="text", text=json.dumps({
        "value": value,
        "unit": unit,
        "results": [result_to_dict(result, context) for result in results],
    }, ensure_ascii=False))]


async def _compare_reachable(args: dict[str, Any]) -> list[TextContent]:
    """List reachable entries grouped by path."""
    unit = args.get("unit")
    if not unit or not isinstance(unit, str):
        return [TextContent(type="text", text='{"error": "unit is required"}')]

    try:
        reachable = list_reachable_entries(unit)
    except ValueError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]

    paths: dict[str, dict[str, Any]] = {}
    for item in reachable:
        path = paths.setdefault(item.path_id, {"path_id": item.path_id, "path_name": item.path_name, "entries": []})
        path["entries"].append(entry_to_dict(item.entry))

    return [TextContent(type="text", text=json.dumps(
        {"unit": unit, "paths": list(paths.values())}, ensure_ascii=False,
    ))]

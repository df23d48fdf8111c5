"""Share state tools for relative-mcp.

Encodes a comparison query as a URL query string and decodes one back,
so a client can hand out links that reproduce a comparison.
"""

import json
from typing import Any

from mcp.types import Tool, TextContent

from relative_mcp.config import config
from relative_mcp.services.comparison_service import QueryContext, result_to_dict, run_query
from relative_mcp.services.override_service import get_session_overrides
from relative_mcp.services.share_service import decode_share_state, encode_share_state


SHARE_TOOLS: list[Tool] = [
    Tool(
        name="share_encode",
        description=(
            "Encode a comparison query (value, unit, entry overrides and factor "
            "overrides) as a URL query string such as 'v=1&u=GW&f=...'. "
            "Session factor overrides are included."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "value": {"type": "number", "description": "Numeric value of the quantity."},
                "unit": {"type": "string", "description": "Unit id (e.g., 'GW')."},
                "entry_overrides": {
                    "type": "object",
                    "additionalProperties": {"type": "string"},
                    "description": "Optional path_id -> entry_id choices.",
                },
            },
            "required": ["value", "unit"],
        },
    ),
    Tool(
        name="share_decode",
        description=(
            "Decode a URL query string produced by share_encode and run the comparison "
            "it describes. Invalid parts fall back to defaults."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Query string, e.g. 'v=1&u=GW'."},
            },
            "required": ["query"],
        },
    ),
]


async def handle_share_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle execution of share tools."""
    if name == "share_encode":
        return await _share_encode(arguments)
    elif name == "share_decode":
        return await _share_decode(arguments)
    else:
        return [TextContent(type="text", text=f"Unknown share tool: {name}")]


def _context_to_dict(context: QueryContext) -> dict[str, Any]:
    return {
        "value": context.input_number,
        "unit": context.unit_id,
        "entry_overrides": dict(context.entry_overrides),
        "factor_overrides": dict(context.factor_overrides),
    }


async def _share_encode(args: dict[str, Any]) -> list[TextContent]:
    """Encode a query as a share string."""
    value = args.get("value")
    unit = args.get("unit")
    entry_overrides = args.get("entry_overrides") or {}

    if value is None or unit is None:
        return [TextContent(type="text", text='{"error": "value and unit are required"}')]

    if not isinstance(unit, str) or not isinstance(entry_overrides, dict):
        return [TextContent(type="text", text='{"error": "unit must be a string and entry_overrides an object"}')]

    try:
        value = float(value)
    except (TypeError, ValueError):
        return [TextContent(type="text", text='{"error": "value must be a number"}')]

    try:
        context = QueryContext(
            input_number=value,
            unit_id=unit,
            factor_overrides=get_session_overrides().snapshot(),
            entry_overrides={str(k): str(v) for k, v in entry_overrides.items()},
        )
        query = encode_share_state(context)
    except ValueError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]

    return [TextContent(type="text", text=json.dumps({"query": query}))]


async def _share_decode(args: dict[str, Any]) -> list[TextContent]:
    """Decode a share string and run its comparison."""
    query = args.get("query")
    if not isinstance(query, str):
        return [TextContent(type="text", text='{"error": "query is required"}')]

    if len(query) > 2000:
        return [TextContent(type="text", text='{"error": "query too long (max 2000 chars)"}')]

    context = decode_share_state(
        query,
        default_value=config.default_value,
        default_unit=config.default_unit,
    )
    try:
        results = run_query(context)
    except ValueError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]

    return [TextContent(type="text", text=json.dumps({
        "state": _context_to_dict(context),
        "results": [result_to_dict(result, context) for result in results],
    }, ensure_ascii=False))]

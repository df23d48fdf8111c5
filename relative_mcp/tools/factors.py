"""Factor override tools for relative-mcp.

Lets a client adjust conversion rule factors (electricity price, EV
efficiency, ...) for the rest of the session. Overrides apply to every
later compare_quantity call.
"""

import json
from typing import Any

from mcp.types import Tool, TextContent

from relative_mcp.services.override_service import display_factor, get_session_overrides
from relative_mcp.services.rule_definitions import CONVERSION_RULES, get_rule


FACTORS_TOOLS: list[Tool] = [
    Tool(
        name="factor_list",
        description=(
            "List conversion rules with their current factor, shown both raw and in "
            "human units (e.g. electricity price in $/kWh, EV efficiency in Wh/km), "
            "and whether the session overrides it."
        ),
        inputSchema={
            "type": "object",
            "properties": {},
        },
    ),
    Tool(
        name="factor_set",
        description=(
            "Override a conversion rule's factor for this session. Give either the raw "
            "factor or display_value in the rule's human unit (see factor_list). "
            "Values must be positive."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "rule_id": {
                    "type": "string",
                    "description": "Conversion rule id (e.g., 'energy-to-money-electricity').",
                },
                "factor": {
                    "type": "number",
                    "description": "Raw factor: base units of the target per base unit of the source.",
                },
                "display_value": {
                    "type": "number",
                    "description": "Factor in human units (e.g., 0.25 for $0.25/kWh).",
                },
            },
            "required": ["rule_id"],
        },
    ),
    Tool(
        name="factor_reset",
        description="Remove a factor override, or all of them when rule_id is omitted.",
        inputSchema={
            "type": "object",
            "properties": {
                "rule_id": {
                    "type": "string",
                    "description": "Conversion rule id to reset. Omit to reset all.",
                },
            },
        },
    ),
]


async def handle_factors_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle execution of factor tools."""
    if name == "factor_list":
        return await _factor_list(arguments)
    elif name == "factor_set":
        return await _factor_set(arguments)
    elif name == "factor_reset":
        return await _factor_reset(arguments)
    else:
        return [TextContent(type="text", text=f"Unknown factors tool: {name}")]


def _current_factors() -> list[dict[str, Any]]:
    overrides = get_session_overrides().snapshot()
    return [display_factor(rule, overrides) for rule in CONVERSION_RULES]


async def _factor_list(args: dict[str, Any]) -> list[TextContent]:
    """List rule factors."""
    return [TextContent(type="text", text=json.dumps({"factors": _current_factors()}))]


async def _factor_set(args: dict[str, Any]) -> list[TextContent]:
    """Set a factor override."""
    rule_id = args.get("rule_id")
    factor = args.get("factor")
    display_value = args.get("display_value")

    if not rule_id or not isinstance(rule_id, str):
        return [TextContent(type="text", text='{"error": "rule_id is required"}')]

    if (factor is None) == (display_value is None):
        return [TextContent(type="text", text='{"error": "give exactly one of factor or display_value"}')]

    store = get_session_overrides()
    try:
        if factor is not None:
            store.apply_override(rule_id, factor)
        else:
            store.apply_display_value(rule_id, display_value)
    except ValueError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]

    rule = get_rule(rule_id)
    return [TextContent(type="text", text=json.dumps(display_factor(rule, store.snapshot())))]


async def _factor_reset(args: dict[str, Any]) -> list[TextContent]:
    """Reset one or all factor overrides."""
    rule_id = args.get("rule_id")
    store = get_session_overrides()

    if rule_id is None:
        store.clear()
    else:
        if not isinstance(rule_id, str):
            return [TextContent(type="text", text='{"error": "rule_id must be a string"}')]
        try:
            store.apply_override(rule_id, None)
        except ValueError as e:
            return [TextContent(type="text", text=json.dumps({"error": str(e)}))]

    return [TextContent(type="text", text=json.dumps({"factors": _current_factors()}))]

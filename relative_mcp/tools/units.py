"""Unit and reference entry tools for relative-mcp.

Provides unit conversion within a dimension and listings of the static
unit and reference entry tables.
"""

import json
from typing import Any

from mcp.types import Tool, TextContent

from relative_mcp.services.comparison_service import entry_to_dict
from relative_mcp.services.entry_definitions import REFERENCE_ENTRIES, get_entries_for_dimension
from relative_mcp.services.unit_definitions import Dimension, convert, get_supported_units


UNITS_TOOLS: list[Tool] = [
    Tool(
        name="unit_convert",
        description=(
            "Convert a value between two units of the same dimension. "
            "Supports power (mW–TW), energy (mWh–TWh), distance (m, km, mi), "
            "time (s, min, hr, day, yr), mass (g, kg, ton) and money (cent–BUSD). "
            "Accepts unit names as aliases (e.g., 'kilowatts' for 'kW')."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "value": {
                    "type": "number",
                    "description": "Numeric value to convert.",
                },
                "from_unit": {
                    "type": "string",
                    "description": "Source unit (e.g., 'kW', 'kilowatt-hours', 'mi').",
                },
                "to_unit": {
                    "type": "string",
                    "description": "Target unit (e.g., 'MW', 'Wh', 'km').",
                },
            },
            "required": ["value", "from_unit", "to_unit"],
        },
    ),
    Tool(
        name="unit_list",
        description=(
            "List all dimensions and their unit ids, smallest unit first. "
            "Useful for discovering which units compare_quantity accepts."
        ),
        inputSchema={
            "type": "object",
            "properties": {},
        },
    ),
    Tool(
        name="entry_list",
        description=(
            "List the real-world reference entries used in comparisons, "
            "with their values, units and assumptions."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "dimension": {
                    "type": "string",
                    "enum": [d.value for d in Dimension],
                    "description": "Optional dimension filter.",
                },
            },
        },
    ),
]


async def handle_units_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle execution of unit tools."""
    if name == "unit_convert":
        return await _unit_convert(arguments)
    elif name == "unit_list":
        return await _unit_list(arguments)
    elif name == "entry_list":
        return await _entry_list(arguments)
    else:
        return [TextContent(type="text", text=f"Unknown units tool: {name}")]


async def _unit_convert(args: dict[str, Any]) -> list[TextContent]:
    """Convert a value between units."""
    value = args.get("value")
    from_unit = args.get("from_unit")
    to_unit = args.get("to_unit")

    if value is None or from_unit is None or to_unit is None:
        return [TextContent(type="text", text='{"error": "value, from_unit, and to_unit are required"}')]

    if not isinstance(from_unit, str) or not isinstance(to_unit, str):
        return [TextContent(type="text", text='{"error": "from_unit and to_unit must be strings"}')]

    try:
        value = float(value)
    except (TypeError, ValueError):
        return [TextContent(type="text", text='{"error": "value must be a number"}')]

    try:
        result = convert(value, from_unit, to_unit)
        return [TextContent(type="text", text=json.dumps({
            "result": result,
            "value": value,
            "from_unit": from_unit,
            "to_unit": to_unit,
        }))]
    except ValueError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]


async def _unit_list(args: dict[str, Any]) -> list[TextContent]:
    """List supported units."""
    units = get_supported_units()
    return [TextContent(type="text", text=json.dumps(units, indent=2))]


async def _entry_list(args: dict[str, Any]) -> list[TextContent]:
    """List reference entries, optionally for one dimension."""
    dimension = args.get("dimension")
    if dimension is None:
        entries = REFERENCE_ENTRIES
    else:
        try:
            entries = get_entries_for_dimension(Dimension(dimension))
        except ValueError:
            return [TextContent(type="text", text=json.dumps({"error": f"Unknown dimension: {dimension}"}))]

    return [TextContent(type="text", text=json.dumps(
        {"entries": [entry_to_dict(entry) for entry in entries]}, ensure_ascii=False,
    ))]

"""Tests for unit and reference entry MCP tool handlers."""

import json

import pytest

from relative_mcp.tools.units import UNITS_TOOLS, handle_units_tool


class TestUnitsToolDefinitions:
    """Tests for tool definitions."""

    def test_unit_convert_required_fields(self):
        tool = next(t for t in UNITS_TOOLS if t.name == "unit_convert")
        required = tool.inputSchema.get("required", [])
        assert "value" in required
        assert "from_unit" in required
        assert "to_unit" in required

    def test_list_tools_exist(self):
        names = [t.name for t in UNITS_TOOLS]
        assert "unit_list" in names
        assert "entry_list" in names


class TestUnitConvertTool:
    """Tests for unit_convert tool handler."""

    @pytest.mark.asyncio
    async def test_power_conversion(self):
        result = await handle_units_tool(
            "unit_convert", {"value": 1, "from_unit": "GW", "to_unit": "MW"}
        )
        data = json.loads(result[0].text)
        assert data["result"] == 1000.0

    @pytest.mark.asyncio
    async def test_alias_conversion(self):
        result = await handle_units_tool(
            "unit_convert", {"value": 1, "from_unit": "miles", "to_unit": "km"}
        )
        data = json.loads(result[0].text)
        assert abs(data["result"] - 1.60934) < 0.001

    @pytest.mark.asyncio
    async def test_missing_fields(self):
        result = await handle_units_tool("unit_convert", {"value": 1})
        data = json.loads(result[0].text)
        assert "error" in data

    @pytest.mark.asyncio
    async def test_incompatible_units(self):
        result = await handle_units_tool(
            "unit_convert", {"value": 1, "from_unit": "kW", "to_unit": "kWh"}
        )
        data = json.loads(result[0].text)
        assert "Incompatible" in data["error"]

    @pytest.mark.asyncio
    async def test_invalid_value(self):
        result = await handle_units_tool(
            "unit_convert", {"value": "not_a_number", "from_unit": "kW", "to_unit": "W"}
        )
        data = json.loads(result[0].text)
        assert "error" in data


class TestUnitListTool:
    """Tests for unit_list tool handler."""

    @pytest.mark.asyncio
    async def test_list_all_units(self):
        result = await handle_units_tool("unit_list", {})
        data = json.loads(result[0].text)
        assert "power" in data
        assert "money" in data
        assert data["energy"][-1] == "TWh"


class TestEntryListTool:
    """Tests for entry_list tool handler."""

    @pytest.mark.asyncio
    async def test_all_entries(self):
        result = await handle_units_tool("entry_list", {})
        data = json.loads(result[0].text)
        ids = [e["id"] for e in data["entries"]]
        assert "nuclear-reactor" in ids
        assert "coffee" in ids

    @pytest.mark.asyncio
    async def test_dimension_filter(self):
        result = await handle_units_tool("entry_list", {"dimension": "mass"})
        data = json.loads(result[0].text)
        assert data["entries"]
        assert all(e["dimension"] == "mass" for e in data["entries"])

    @pytest.mark.asyncio
    async def test_unknown_dimension(self):
        result = await handle_units_tool("entry_list", {"dimension": "charm"})
        data = json.loads(result[0].text)
        assert "error" in data

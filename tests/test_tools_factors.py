"""Tests for factor override MCP tool handlers."""

import json

import pytest

from relative_mcp.services.override_service import get_session_overrides
from relative_mcp.tools.factors import FACTORS_TOOLS, handle_factors_tool

ELECTRICITY = "energy-to-money-electricity"


def _factor(data, rule_id):
    return next(f for f in data["factors"] if f["rule_id"] == rule_id)


class TestFactorsToolDefinitions:
    """Tests for tool definitions."""

    def test_tools_exist(self):
        names = [t.name for t in FACTORS_TOOLS]
        assert names == ["factor_list", "factor_set", "factor_reset"]


class TestFactorListTool:
    """Tests for factor_list tool handler."""

    @pytest.mark.asyncio
    async def test_defaults(self):
        result = await handle_factors_tool("factor_list", {})
        data = json.loads(result[0].text)
        electricity = _factor(data, ELECTRICITY)
        assert electricity["display_value"] == pytest.approx(0.16)
        assert electricity["display_unit"] == "$/kWh"
        assert electricity["overridden"] is False
        assert len(data["factors"]) == 5


class TestFactorSetTool:
    """Tests for factor_set tool handler."""

    @pytest.mark.asyncio
    async def test_set_raw_factor(self):
        result = await handle_factors_tool("factor_set", {"rule_id": ELECTRICITY, "factor": 0.0002})
        data = json.loads(result[0].text)
        assert data["factor"] == 0.0002
        assert data["overridden"] is True
        assert get_session_overrides().get(ELECTRICITY) == 0.0002

    @pytest.mark.asyncio
    async def test_set_display_value(self):
        result = await handle_factors_tool(
            "factor_set", {"rule_id": "energy-to-distance-tesla", "display_value": 200}
        )
        data = json.loads(result[0].text)
        assert data["display_value"] == pytest.approx(200)
        assert data["factor"] == pytest.approx(5.0)

    @pytest.mark.asyncio
    async def test_requires_exactly_one_value(self):
        result = await handle_factors_tool("factor_set", {"rule_id": ELECTRICITY})
        assert "error" in json.loads(result[0].text)

        result = await handle_factors_tool(
            "factor_set", {"rule_id": ELECTRICITY, "factor": 1, "display_value": 1}
        )
        assert "error" in json.loads(result[0].text)

    @pytest.mark.asyncio
    async def test_rejects_non_positive(self):
        result = await handle_factors_tool("factor_set", {"rule_id": ELECTRICITY, "factor": 0})
        data = json.loads(result[0].text)
        assert "error" in data
        assert get_session_overrides().get(ELECTRICITY) is None

    @pytest.mark.asyncio
    async def test_unknown_rule(self):
        result = await handle_factors_tool("factor_set", {"rule_id": "energy-to-unicorns", "factor": 1})
        data = json.loads(result[0].text)
        assert "Unknown conversion rule" in data["error"]


class TestFactorResetTool:
    """Tests for factor_reset tool handler."""

    @pytest.mark.asyncio
    async def test_reset_one(self):
        store = get_session_overrides()
        store.apply_override(ELECTRICITY, 0.0002)
        store.apply_override("energy-to-mass-aluminum", 0.0001)

        result = await handle_factors_tool("factor_reset", {"rule_id": ELECTRICITY})
        data = json.loads(result[0].text)

        assert _factor(data, ELECTRICITY)["overridden"] is False
        assert _factor(data, "energy-to-mass-aluminum")["overridden"] is True

    @pytest.mark.asyncio
    async def test_reset_all(self):
        get_session_overrides().apply_override(ELECTRICITY, 0.0002)
        await handle_factors_tool("factor_reset", {})
        assert len(get_session_overrides()) == 0

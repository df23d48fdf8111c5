"""Tests for share state MCP tool handlers."""

import json
from unittest.mock import patch

import pytest

from relative_mcp.config import RelativeMcpConfig
from relative_mcp.services.override_service import get_session_overrides
from relative_mcp.tools.share import SHARE_TOOLS, handle_share_tool


class TestShareToolDefinitions:
    """Tests for tool definitions."""

    def test_tools_exist(self):
        names = [t.name for t in SHARE_TOOLS]
        assert "share_encode" in names
        assert "share_decode" in names


class TestShareEncodeTool:
    """Tests for share_encode tool handler."""

    @pytest.mark.asyncio
    async def test_encode(self):
        result = await handle_share_tool("share_encode", {"value": 1, "unit": "GW"})
        data = json.loads(result[0].text)
        assert data["query"] == "v=1&u=GW"

    @pytest.mark.asyncio
    async def test_includes_session_overrides(self):
        get_session_overrides().apply_override("energy-to-money-electricity", 0.0002)
        result = await handle_share_tool("share_encode", {
            "value": 1, "unit": "GW", "entry_overrides": {"direct": "nuclear-reactor"},
        })
        data = json.loads(result[0].text)
        assert data["query"] == "v=1&u=GW&e=direct:nuclear-reactor&f=energy-to-money-electricity:0.0002"

    @pytest.mark.asyncio
    async def test_missing_fields(self):
        result = await handle_share_tool("share_encode", {"unit": "GW"})
        data = json.loads(result[0].text)
        assert "error" in data

    @pytest.mark.asyncio
    async def test_unknown_unit(self):
        result = await handle_share_tool("share_encode", {"value": 1, "unit": "parsec"})
        data = json.loads(result[0].text)
        assert data["error"] == "Unknown unit: parsec"

    @pytest.mark.asyncio
    async def test_alias_encoded_as_unit_id(self):
        result = await handle_share_tool("share_encode", {"value": 1, "unit": "gigawatts"})
        data = json.loads(result[0].text)
        assert data["query"] == "v=1&u=GW"

    @pytest.mark.asyncio
    async def test_separator_in_entry_id(self):
        result = await handle_share_tool("share_encode", {
            "value": 1, "unit": "GW", "entry_overrides": {"direct": "a,b"},
        })
        data = json.loads(result[0].text)
        assert "error" in data


class TestShareDecodeTool:
    """Tests for share_decode tool handler."""

    @pytest.mark.asyncio
    async def test_decode_runs_query(self):
        result = await handle_share_tool("share_decode", {"query": "v=1&u=GW&e=direct:nuclear-reactor"})
        data = json.loads(result[0].text)
        assert data["state"]["unit"] == "GW"
        assert data["state"]["entry_overrides"] == {"direct": "nuclear-reactor"}
        assert data["results"][0]["entry"]["id"] == "nuclear-reactor"

    @pytest.mark.asyncio
    async def test_uses_configured_defaults(self):
        with patch("relative_mcp.tools.share.config", RelativeMcpConfig(default_value=2.0, default_unit="kWh")):
            result = await handle_share_tool("share_decode", {"query": ""})
        data = json.loads(result[0].text)
        assert data["state"]["value"] == 2.0
        assert data["state"]["unit"] == "kWh"

    @pytest.mark.asyncio
    async def test_query_too_long(self):
        result = await handle_share_tool("share_decode", {"query": "v=1&" * 600})
        data = json.loads(result[0].text)
        assert "too long" in data["error"]

    @pytest.mark.asyncio
    async def test_missing_query(self):
        result = await handle_share_tool("share_decode", {})
        data = json.loads(result[0].text)
        assert "error" in data

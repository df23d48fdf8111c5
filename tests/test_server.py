"""Tests for MCP server."""

from unittest.mock import AsyncMock, patch

import pytest
from mcp.types import TextContent

from relative_mcp.server import get_enabled_tools, list_tools, call_tool


class TestGetEnabledTools:
    """Tests for get_enabled_tools function."""

    def test_all_groups_enabled(self):
        """Test with every group enabled."""
        with patch("relative_mcp.server.config") as mock_config:
            mock_config.is_enabled.return_value = True

            tools = get_enabled_tools()

            tool_names = [t.name for t in tools]
            assert "compare_quantity" in tool_names
            assert "unit_convert" in tool_names
            assert "factor_set" in tool_names
            assert "share_encode" in tool_names

    def test_only_compare_enabled(self):
        """Test with only compare enabled."""
        with patch("relative_mcp.server.config") as mock_config:
            mock_config.is_enabled.side_effect = lambda x: x == "compare"

            tools = get_enabled_tools()

            tool_names = [t.name for t in tools]
            assert all(name.startswith("compare_") for name in tool_names)
            assert tool_names

    def test_no_tools_enabled(self):
        """Test with no tools enabled."""
        with patch("relative_mcp.server.config") as mock_config:
            mock_config.is_enabled.return_value = False

            tools = get_enabled_tools()

            assert tools == []


class TestListTools:
    """Tests for list_tools handler."""

    @pytest.mark.asyncio
    async def test_list_tools_returns_enabled(self):
        """Test that list_tools returns enabled tools."""
        with patch("relative_mcp.server.config") as mock_config:
            mock_config.is_enabled.side_effect = lambda x: x in ["compare", "factors"]

            tools = await list_tools()

            tool_names = [t.name for t in tools]
            assert "compare_quantity" in tool_names
            assert "factor_list" in tool_names
            assert "unit_list" not in tool_names


class TestCallTool:
    """Tests for call_tool handler."""

    @pytest.mark.asyncio
    async def test_call_compare_tool(self):
        """Test calling a compare tool."""
        with patch("relative_mcp.server.config") as mock_config, \
             patch("relative_mcp.server.handle_compare_tool", new_callable=AsyncMock) as mock_handler:

            mock_config.is_enabled.return_value = True
            mock_handler.return_value = [TextContent(type="text", text="result")]

            result = await call_tool("compare_quantity", {"value": 1, "unit": "GW"})

            mock_handler.assert_called_once_with("compare_quantity", {"value": 1, "unit": "GW"})
            assert len(result) == 1
            assert result[0].text == "result"

    @pytest.mark.asyncio
    async def test_call_compare_tool_disabled(self):
        """Test calling compare tool when disabled."""
        with patch("relative_mcp.server.config") as mock_config:
            mock_config.is_enabled.return_value = False

            result = await call_tool("compare_quantity", {})

            assert len(result) == 1
            assert "not enabled" in result[0].text

    @pytest.mark.asyncio
    async def test_entry_tools_route_to_units(self):
        """Test that entry_ tools belong to the units group."""
        with patch("relative_mcp.server.config") as mock_config, \
             patch("relative_mcp.server.handle_units_tool", new_callable=AsyncMock) as mock_handler:

            mock_config.is_enabled.side_effect = lambda x: x == "units"
            mock_handler.return_value = [TextContent(type="text", text="entries")]

            result = await call_tool("entry_list", {})

            mock_handler.assert_called_once_with("entry_list", {})
            assert result[0].text == "entries"

    @pytest.mark.asyncio
    async def test_call_unknown_tool(self):
        """Test calling an unknown tool."""
        result = await call_tool("unknown_tool", {})

        assert len(result) == 1
        assert "Unknown tool" in result[0].text
        assert "unknown_tool" in result[0].text

    @pytest.mark.asyncio
    async def test_call_tool_routes_correctly(self):
        """Test that tools are routed to correct handlers."""
        with patch("relative_mcp.server.config") as mock_config, \
             patch("relative_mcp.server.handle_factors_tool", new_callable=AsyncMock) as factors_handler, \
             patch("relative_mcp.server.handle_share_tool", new_callable=AsyncMock) as share_handler:

            mock_config.is_enabled.return_value = True
            factors_handler.return_value = [TextContent(type="text", text="factors")]
            share_handler.return_value = [TextContent(type="text", text="share")]

            # Call factors tool
            await call_tool("factor_list", {})
            factors_handler.assert_called_with("factor_list", {})
            share_handler.assert_not_called()

            factors_handler.reset_mock()

            # Call share tool
            await call_tool("share_decode", {"query": "v=1"})
            share_handler.assert_called_with("share_decode", {"query": "v=1"})
            factors_handler.assert_not_called()

    @pytest.mark.asyncio
    async def test_end_to_end(self):
        """Test a real compare call through the router."""
        with patch("relative_mcp.server.config") as mock_config:
            mock_config.is_enabled.return_value = True

            result = await call_tool("compare_quantity", {"value": 1, "unit": "GW"})

            assert "large-city" in result[0].text

import logging
from typing import Any

from mcp.server import Server
from mcp.types import Tool, TextContent

from relative_mcp.config import config
from relative_mcp.tools.compare import COMPARE_TOOLS, handle_compare_tool
from relative_mcp.tools.units import UNITS_TOOLS, handle_units_tool
from relative_mcp.tools.factors import FACTORS_TOOLS, handle_factors_tool
from relative_mcp.tools.share import SHARE_TOOLS, handle_share_tool

logger = logging.getLogger(__name__)

# Create the MCP server
server = Server("relative-mcp")


def get_enabled_tools() -> list[Tool]:
    """Get all tools from enabled tool groups."""
    tools: list[Tool] = []

    if config.is_enabled("compare"):
        tools.extend(COMPARE_TOOLS)
        logger.info("Enabled tool group: compare (%d tools)", len(COMPARE_TOOLS))

    if config.is_enabled("units"):
        tools.extend(UNITS_TOOLS)
        logger.info("Enabled tool group: units (%d tools)", len(UNITS_TOOLS))

    if config.is_enabled("factors"):
        tools.extend(FACTORS_TOOLS)
        logger.info("Enabled tool group: factors (%d tools)", len(FACTORS_TOOLS))

    if config.is_enabled("share"):
        tools.extend(SHARE_TOOLS)
        logger.info("Enabled tool group: share (%d tools)", len(SHARE_TOOLS))

    return tools


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools based on configuration."""
    return get_enabled_tools()


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Route tool calls to the appropriate handler."""
    logger.info("Tool call: %s with args: %s", name, arguments)

    # Route to appropriate handler based on tool prefix
    if name.startswith("compare_"):
        if not config.is_enabled("compare"):
            return [TextContent(type="text", text="Compare tools are not enabled")]
        return await handle_compare_tool(name, arguments)

    elif name.startswith("unit_") or name.startswith("entry_"):
        if not config.is_enabled("units"):
            return [TextContent(type="text", text="Units tools are not enabled")]
        return await handle_units_tool(name, arguments)

    elif name.startswith("factor_"):
        if not config.is_enabled("factors"):
            return [TextContent(type="text", text="Factors tools are not enabled")]
        return await handle_factors_tool(name, arguments)

    elif name.startswith("share_"):
        if not config.is_enabled("share"):
            return [TextContent(type="text", text="Share tools are not enabled")]
        return await handle_share_tool(name, arguments)

    else:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]

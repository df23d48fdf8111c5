from relative_mcp.tools.compare import COMPARE_TOOLS, handle_compare_tool
from relative_mcp.tools.units import UNITS_TOOLS, handle_units_tool
from relative_mcp.tools.factors import FACTORS_TOOLS, handle_factors_tool
from relative_mcp.tools.share import SHARE_TOOLS, handle_share_tool

__all__ = [
    "COMPARE_TOOLS",
    "handle_compare_tool",
    "UNITS_TOOLS",
    "handle_units_tool",
    "FACTORS_TOOLS",
    "handle_factors_tool",
    "SHARE_TOOLS",
    "handle_share_tool",
]

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_ALL_TOOL_GROUPS = "compare,units,factors,share"


@dataclass
class RelativeMcpConfig:
    """Configuration for relative-mcp server."""

    # Server settings
    host: str = "localhost"
    port: int = 8011

    # Tool groups to enable (comma-separated in env, or list)
    enabled_tools: set[str] = field(
        default_factory=lambda: {"compare", "units", "factors", "share"}
    )

    # Query used when a share link leaves out the value or unit
    default_value: float = 1.0
    default_unit: str = "GW"

    @classmethod
    def from_env(cls) -> "RelativeMcpConfig":
        """Load configuration from environment variables."""
        tools_str = os.getenv("RELATIVE_MCP_TOOLS", _ALL_TOOL_GROUPS)
        enabled_tools = {t.strip() for t in tools_str.split(",") if t.strip()}

        default_value_str = os.getenv("RELATIVE_DEFAULT_VALUE", "1")
        try:
            default_value = float(default_value_str)
        except ValueError:
            logger.warning("Invalid RELATIVE_DEFAULT_VALUE %r - using 1", default_value_str)
            default_value = 1.0

        return cls(
            host=os.getenv("RELATIVE_MCP_HOST", "localhost"),
            port=int(os.getenv("RELATIVE_MCP_PORT", "8011")),
            enabled_tools=enabled_tools,
            default_value=default_value,
            default_unit=os.getenv("RELATIVE_DEFAULT_UNIT", "GW"),
        )

    def is_enabled(self, tool_group: str) -> bool:
        """Check if a tool group is enabled."""
        return tool_group in self.enabled_tools


# Global config instance
config = RelativeMcpConfig.from_env()

"""Services module for relative-mcp."""

from relative_mcp.services.comparison_service import (
    QueryContext,
    ReachableEntry,
    discover_and_select,
    list_reachable_entries,
    run_query,
)
from relative_mcp.services.override_service import (
    FactorOverrides,
    InvalidOverrideFactorError,
    get_session_overrides,
    reset_session_overrides,
)
from relative_mcp.services.unit_definitions import UnknownUnitError

__all__ = [
    "QueryContext",
    "ReachableEntry",
    "discover_and_select",
    "list_reachable_entries",
    "run_query",
    "FactorOverrides",
    "InvalidOverrideFactorError",
    "get_session_overrides",
    "reset_session_overrides",
    "UnknownUnitError",
]

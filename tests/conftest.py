import os
from unittest.mock import patch

import pytest

from relative_mcp.services.override_service import reset_session_overrides


@pytest.fixture(autouse=True)
def reset_config():
    """Reset config and session overrides before each test."""
    # Store original env vars
    original_env = {
        "RELATIVE_MCP_HOST": os.environ.get("RELATIVE_MCP_HOST"),
        "RELATIVE_MCP_PORT": os.environ.get("RELATIVE_MCP_PORT"),
        "RELATIVE_MCP_TOOLS": os.environ.get("RELATIVE_MCP_TOOLS"),
        "RELATIVE_DEFAULT_VALUE": os.environ.get("RELATIVE_DEFAULT_VALUE"),
        "RELATIVE_DEFAULT_UNIT": os.environ.get("RELATIVE_DEFAULT_UNIT"),
    }
    reset_session_overrides()

    yield

    reset_session_overrides()

    # Restore original env vars
    for key, value in original_env.items():
        if value is not None:
            os.environ[key] = value
        elif key in os.environ:
            del os.environ[key]


@pytest.fixture
def test_env():
    """Set up test environment variables."""
    env_vars = {
        "RELATIVE_MCP_HOST": "localhost",
        "RELATIVE_MCP_PORT": "8011",
        "RELATIVE_MCP_TOOLS": "compare,units",
        "RELATIVE_DEFAULT_VALUE": "2",
        "RELATIVE_DEFAULT_UNIT": "kWh",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def ladder_entries():
    """Power entries at 1, 10, 100 and 1000 W."""
    from relative_mcp.services.entry_definitions import ReferenceEntry

    return [
        ReferenceEntry(f"p{watts}", f"{watts} W thing", "⚡", watts, "W", "test entry")
        for watts in (1, 10, 100, 1000)
    ]

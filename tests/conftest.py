"""
Shared fixtures for all tests.
"""
import pytest

from mcp_tool import MCPToolManager


@pytest.fixture(autouse=True)
def reset_tool_manager():
    """Give every test a fresh tool manager singleton."""
    MCPToolManager._instance = None
    yield
    MCPToolManager._instance = None

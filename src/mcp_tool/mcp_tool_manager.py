"""Singleton manager for MCP tools."""

import logging
from typing import Dict, List

from mcp_tool.mcp_tool import MCPTool
from mcp_tool.mcp_tool_call import MCPToolCall
from mcp_tool.mcp_tool_definition import MCPToolDefinition
from mcp_tool.mcp_tool_exceptions import MCPToolExecutionError
from mcp_tool.mcp_tool_result import MCPToolResult


class MCPToolManager:
    """Singleton manager that registers tools and routes calls to them."""

    _instance: 'MCPToolManager | None' = None

    def __new__(cls) -> 'MCPToolManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)

        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_initialized'):
            self._registered_tools: Dict[str, MCPTool] = {}
            self._logger = logging.getLogger("MCPToolManager")
            self._initialized = True

    def register_tool(self, tool: MCPTool) -> None:
        """
        Register a tool so it can be listed and called.

        Args:
            tool: The tool to register

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        definition = tool.get_definition()

        if definition.name in self._registered_tools:
            raise ValueError(f"Tool '{definition.name}' is already registered")

        self._registered_tools[definition.name] = tool
        self._logger.info("Registered tool: %s (title: %s)", definition.name, definition.title)

    def unregister_tool(self, name: str) -> None:
        """
        Unregister a tool.

        Args:
            name: Name of the tool to unregister
        """
        if name in self._registered_tools:
            del self._registered_tools[name]
            self._logger.info("Unregistered tool: %s", name)

    def get_tool(self, name: str) -> MCPTool | None:
        """
        Get a registered tool by its name.

        Args:
            name: Name of the tool to retrieve

        Returns:
            The registered tool instance, or None if not found
        """
        return self._registered_tools.get(name)

    def get_tool_names(self) -> List[str]:
        """Get names of all registered tools."""
        return list(self._registered_tools.keys())

    def get_tool_definitions(self) -> List[MCPToolDefinition]:
        """
        Get definitions for all registered tools.

        Returns:
            List of tool definitions
        """
        return [tool.get_definition() for tool in self._registered_tools.values()]

    async def call_tool(self, tool_call: MCPToolCall) -> MCPToolResult:
        """
        Route a tool call to the registered tool.

        Failures are reported as error results; no exception leaves this method.

        Args:
            tool_call: The call to dispatch

        Returns:
            Result produced by the tool, or an error result
        """
        tool = self._registered_tools.get(tool_call.name)
        if tool is None:
            self._logger.warning("Call to unknown tool: %s", tool_call.name)
            return MCPToolResult.from_text(
                tool_call.id, tool_call.name, f"Error: Unknown tool '{tool_call.name}'", is_error=True
            )

        try:
            return await tool.execute(tool_call)

        except MCPToolExecutionError as e:
            self._logger.debug("Tool '%s' rejected call %s: %s", tool_call.name, tool_call.id, str(e))
            return MCPToolResult.from_text(tool_call.id, tool_call.name, f"Error: {str(e)}", is_error=True)

        except Exception as e:
            self._logger.error(
                "Unexpected error in tool '%s': %s", tool_call.name, str(e), exc_info=True
            )
            return MCPToolResult.from_text(
                tool_call.id, tool_call.name, f"Error: {tool_call.name} failed: {str(e)}", is_error=True
            )

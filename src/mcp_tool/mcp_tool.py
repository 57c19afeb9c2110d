"""Abstract base class for MCP tools."""

from abc import ABC, abstractmethod

from mcp_tool.mcp_tool_call import MCPToolCall
from mcp_tool.mcp_tool_definition import MCPToolDefinition
from mcp_tool.mcp_tool_result import MCPToolResult


class MCPTool(ABC):
    """Abstract base class for MCP tools."""

    @abstractmethod
    def get_definition(self) -> MCPToolDefinition:
        """
        Get the tool definition for registration.

        Returns:
            MCPToolDefinition describing this tool's interface
        """

    @abstractmethod
    async def execute(self, tool_call: MCPToolCall) -> MCPToolResult:
        """
        Execute the tool with given arguments.

        Args:
            tool_call: Tool call containing arguments and metadata

        Returns:
            MCPToolResult containing the execution result

        Raises:
            MCPToolExecutionError: If the arguments cannot be used to run the tool
        """

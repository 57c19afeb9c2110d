"""Exposes the file move operation as an MCP tool."""

import logging

from mcp_tool import (
    MCPTool, MCPToolCall, MCPToolDefinition, MCPToolParameter, MCPToolResult
)
from file_move.file_move_operation import FileMoveOperation
from file_move.file_move_request import FileMoveRequest


class FileMoveMCPTool(MCPTool):
    """Tool that moves a file within the project directory structure."""

    def __init__(self, operation: FileMoveOperation) -> None:
        """
        Initialize the tool.

        Args:
            operation: Move operation that does the work
        """
        self._operation = operation
        self._logger = logging.getLogger("FileMoveMCPTool")

    def get_definition(self) -> MCPToolDefinition:
        """
        Get the tool definition.

        Returns:
            Tool definition with parameters and description
        """
        return MCPToolDefinition(
            name="file-move",
            title="File Move",
            description="Move a file within the project directory structure",
            parameters=[
                MCPToolParameter(
                    name="source",
                    type="string",
                    description="Path of the file to move, relative to the project root",
                    required=True
                ),
                MCPToolParameter(
                    name="destination",
                    type="string",
                    description="Path to move the file to, relative to the project root",
                    required=True
                ),
                MCPToolParameter(
                    name="createDirectory",
                    type="boolean",
                    description="Create the destination directory if it does not exist",
                    required=False,
                    default=True
                )
            ]
        )

    async def execute(self, tool_call: MCPToolCall) -> MCPToolResult:
        """
        Move a file.

        Args:
            tool_call: Tool call with `source`, `destination` and optional `createDirectory`

        Returns:
            Tool result carrying the move message; `is_error` is False for warnings

        Raises:
            MCPToolExecutionError: If an argument has the wrong type
        """
        self._logger.info("Processing file-move tool")

        request = FileMoveRequest.from_arguments(tool_call.arguments)
        result = self._operation.move(request)

        return MCPToolResult.from_text(tool_call.id, tool_call.name, result.message, is_error=result.is_error)

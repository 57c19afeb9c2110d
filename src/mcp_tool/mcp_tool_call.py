"""MCP tool call representation."""

from dataclasses import dataclass, field
from typing import Any, Dict

from mcp_tool.mcp_tool_exceptions import MCPToolExecutionError


@dataclass
class MCPToolCall:
    """A request to invoke a registered tool by name."""
    id: str
    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, tool_call_id: str, data: Dict[str, Any]) -> "MCPToolCall":
        """
        Build a tool call from the `params` of a `tools/call` request.

        Args:
            tool_call_id: Identifier of the request
            data: Dictionary with `name` and optional `arguments`

        Returns:
            New tool call

        Raises:
            MCPToolExecutionError: If the name or arguments are malformed
        """
        name = data.get("name")
        if not name or not isinstance(name, str):
            raise MCPToolExecutionError("Tool call has no 'name'")

        arguments = data.get("arguments")
        if arguments is None:
            arguments = {}

        if not isinstance(arguments, dict):
            raise MCPToolExecutionError(f"Arguments for tool '{name}' must be an object")

        return cls(id=tool_call_id, name=name, arguments=arguments)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the tool call to a dictionary.

        Returns:
            Dictionary representation of the tool call
        """
        return {
            'id': self.id,
            'name': self.name,
            'arguments': self.arguments
        }

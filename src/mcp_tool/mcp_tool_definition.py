"""MCP tool definition."""

from dataclasses import dataclass
from typing import Any, Dict, List

from mcp_tool.mcp_tool_parameter import MCPToolParameter


@dataclass
class MCPToolDefinition:
    """Definition of an available tool."""
    name: str
    title: str
    description: str
    parameters: List[MCPToolParameter]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the tool definition to the wire format used in tool listings.

        Returns:
            Dictionary with the tool name, title, description and input schema
        """
        properties: Dict[str, Any] = {}
        required = []

        for param in self.parameters:
            properties[param.name] = param.to_schema()
            if param.required:
                required.append(param.name)

        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "inputSchema": {
                "type": "object",
                "properties": properties,
                "required": required
            }
        }

"""MCP tool parameter definition."""

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class MCPToolParameter:
    """Definition of a tool input parameter."""
    name: str
    type: str  # "string", "number", "integer", "boolean"
    description: str
    required: bool = True
    enum: List[str] | None = None
    default: Any = None

    def to_schema(self) -> Dict[str, Any]:
        """
        Convert the parameter to a JSON schema property.

        Returns:
            JSON schema fragment describing this parameter
        """
        schema: Dict[str, Any] = {
            "type": self.type,
            "description": self.description
        }
        if self.enum:
            schema["enum"] = self.enum

        if self.default is not None:
            schema["default"] = self.default

        return schema

"""MCP tool result representation."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from mcp_tool.mcp_tool_text_content import MCPToolTextContent


@dataclass
class MCPToolResult:
    """Result of a tool execution."""
    id: str
    name: str
    content: List[MCPToolTextContent] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def from_text(cls, tool_call_id: str, name: str, text: str, is_error: bool = False) -> "MCPToolResult":
        """
        Build a result holding a single text block.

        Args:
            tool_call_id: ID of the tool call this result answers
            name: Name of the tool that produced the result
            text: Message text
            is_error: Whether the result reports a failure

        Returns:
            New tool result
        """
        return cls(id=tool_call_id, name=name, content=[MCPToolTextContent(text=text)], is_error=is_error)

    @property
    def text(self) -> str:
        """All text blocks joined with newlines."""
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the tool result to a dictionary.

        Returns:
            Dictionary representation of the tool result
        """
        return {
            'id': self.id,
            'name': self.name,
            'content': [block.to_dict() for block in self.content],
            'isError': self.is_error
        }

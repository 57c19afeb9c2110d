"""Text content block returned by a tool."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class MCPToolTextContent:
    """A single human-readable text block in a tool result."""
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'text',
            'text': self.text
        }

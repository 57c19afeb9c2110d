"""File move request."""

from dataclasses import dataclass
from typing import Any, Dict

from mcp_tool import MCPToolExecutionError


_TRUE_STRINGS = {"true", "1", "yes"}
_FALSE_STRINGS = {"false", "0", "no"}


@dataclass(frozen=True)
class FileMoveRequest:
    """Paths are relative to the project root."""
    source: str
    destination: str
    create_directory: bool = True

    @classmethod
    def from_arguments(cls, arguments: Dict[str, Any]) -> "FileMoveRequest":
        """
        Build a request from tool call arguments.

        Missing paths become empty strings so the move itself can report them.

        Args:
            arguments: Tool call arguments (`source`, `destination`, `createDirectory`)

        Returns:
            New request

        Raises:
            MCPToolExecutionError: If an argument has the wrong type
        """
        source = arguments.get("source")
        if source is None:
            source = ""

        if not isinstance(source, str):
            raise MCPToolExecutionError("'source' must be a string")

        destination = arguments.get("destination")
        if destination is None:
            destination = ""

        if not isinstance(destination, str):
            raise MCPToolExecutionError("'destination' must be a string")

        return cls(
            source=source,
            destination=destination,
            create_directory=cls._parse_bool("createDirectory", arguments.get("createDirectory"), True)
        )

    @staticmethod
    def _parse_bool(key: str, value: Any, default: bool) -> bool:
        if value is None:
            return default

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True

            if lowered in _FALSE_STRINGS:
                return False

        raise MCPToolExecutionError(f"'{key}' must be a boolean")

"""Exception classes for MCP tool framework."""


class MCPToolExecutionError(Exception):
    """Exception raised when a tool cannot run with the arguments it was given."""

    def __init__(self, message: str):
        """
        Initialize tool execution error.

        Args:
            message: Error message
        """
        super().__init__(message)

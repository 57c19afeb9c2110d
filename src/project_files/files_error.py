class FilesError(Exception):
    """Base exception for filesystem access errors."""


class FilesReadError(FilesError):
    """Raised when a file cannot be read."""

    def __init__(self, path: str, message: str):
        super().__init__(f"Failed to read '{path}': {message}")
        self.path = path

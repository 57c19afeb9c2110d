"""Abstract filesystem capability."""

from abc import ABC, abstractmethod


class FilesInterface(ABC):
    """
    Minimal set of filesystem operations a tool may depend on.

    Only `read` reports failure by raising; the mutating operations return
    False instead so callers can decide how severe the failure is.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether a file or directory exists at `path`."""

    @abstractmethod
    def read(self, path: str) -> bytes:
        """
        Read the full contents of a file.

        Args:
            path: Absolute path of the file

        Returns:
            File contents

        Raises:
            FilesReadError: If the file is missing or cannot be read
        """

    @abstractmethod
    def write(self, path: str, content: bytes) -> bool:
        """
        Write `content` to a file, replacing any existing contents.

        Missing parent directories are not created.

        Returns:
            True if the file was written, False otherwise
        """

    @abstractmethod
    def delete(self, path: str) -> bool:
        """
        Delete a file.

        Returns:
            True if the file was deleted, False otherwise
        """

    @abstractmethod
    def ensure_directory(self, path: str) -> bool:
        """
        Create a directory and any missing parents.

        Returns:
            True if the directory exists afterwards, False otherwise
        """

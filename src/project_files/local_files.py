"""Filesystem access backed by the local disk."""

import logging
from pathlib import Path

from project_files.files_error import FilesReadError
from project_files.files_interface import FilesInterface


class LocalFiles(FilesInterface):
    """FilesInterface implementation using pathlib."""

    def __init__(self) -> None:
        self._logger = logging.getLogger("LocalFiles")

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def read(self, path: str) -> bytes:
        file_path = Path(path)
        if not file_path.is_file():
            raise FilesReadError(path, "not a file")

        try:
            with open(file_path, 'rb') as f:
                return f.read()

        except PermissionError as e:
            raise FilesReadError(path, f"permission denied: {str(e)}") from e

        except OSError as e:
            raise FilesReadError(path, str(e)) from e

    def write(self, path: str, content: bytes) -> bool:
        try:
            with open(path, 'wb') as f:
                f.write(content)

        except OSError as e:
            self._logger.warning("Failed to write file '%s': %s", path, str(e))
            return False

        return True

    def delete(self, path: str) -> bool:
        try:
            Path(path).unlink()

        except OSError as e:
            self._logger.warning("Failed to delete file '%s': %s", path, str(e))
            return False

        return True

    def ensure_directory(self, path: str) -> bool:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)

        except OSError as e:
            self._logger.warning("Failed to create directory '%s': %s", path, str(e))
            return False

        return True

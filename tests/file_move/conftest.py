"""
Shared fixtures for file move tests.
"""
import os
from typing import Any, Dict, List, Tuple

import pytest

from mcp_tool import MCPToolCall
from file_move import FileMoveMCPTool, FileMoveOperation
from project_directories import ProjectDirectories
from project_files import FilesInterface, FilesReadError


ROOT = "/test/project"


class InMemoryFiles(FilesInterface):
    """
    In-memory filesystem that records every call made to it.

    Failure flags make individual operations fail the way the real
    filesystem reports it: `read` raises, everything else returns False.
    """

    def __init__(self) -> None:
        self.files: Dict[str, bytes] = {}
        self.directories = {"/", "/test", ROOT}
        self.calls: List[Tuple[str, str]] = []
        self.fail_read = False
        self.fail_write = False
        self.fail_delete = False
        self.fail_ensure_directory = False
        self.exists_error: Exception | None = None

    def add_file(self, path: str, content: bytes) -> None:
        self._add_directory(os.path.dirname(path))
        self.files[path] = content

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def exists(self, path: str) -> bool:
        self.calls.append(("exists", path))
        if self.exists_error is not None:
            raise self.exists_error

        return path in self.files or path in self.directories

    def read(self, path: str) -> bytes:
        self.calls.append(("read", path))
        if self.fail_read or path not in self.files:
            raise FilesReadError(path, "unreadable")

        return self.files[path]

    def write(self, path: str, content: bytes) -> bool:
        self.calls.append(("write", path))
        if self.fail_write or os.path.dirname(path) not in self.directories:
            return False

        self.files[path] = content
        return True

    def delete(self, path: str) -> bool:
        self.calls.append(("delete", path))
        if self.fail_delete or path not in self.files:
            return False

        del self.files[path]
        return True

    def ensure_directory(self, path: str) -> bool:
        self.calls.append(("ensure_directory", path))
        if self.fail_ensure_directory:
            return False

        self._add_directory(path)
        return True

    def _add_directory(self, path: str) -> None:
        while path not in self.directories:
            self.directories.add(path)
            path = os.path.dirname(path)


@pytest.fixture
def files():
    """Fixture providing an empty in-memory filesystem."""
    return InMemoryFiles()


@pytest.fixture
def directories():
    """Fixture providing the project root used by the in-memory tests."""
    return ProjectDirectories(ROOT)


@pytest.fixture
def operation(files, directories):
    """Fixture providing a move operation over the in-memory filesystem."""
    return FileMoveOperation(files, directories)


@pytest.fixture
def file_move_tool(operation):
    """Fixture providing the file move tool."""
    return FileMoveMCPTool(operation)


@pytest.fixture
def make_tool_call():
    """Factory for creating MCPToolCall objects for testing."""
    counter = [0]

    def _make_call(tool_name: str, arguments: Dict[str, Any]) -> MCPToolCall:
        counter[0] += 1
        return MCPToolCall(
            id=f"test_call_{counter[0]}",
            name=tool_name,
            arguments=arguments
        )

    return _make_call

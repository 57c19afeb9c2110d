"""File move tool."""

from file_move.file_move_mcp_tool import FileMoveMCPTool
from file_move.file_move_operation import FileMoveOperation
from file_move.file_move_outcome import FileMoveOutcome
from file_move.file_move_request import FileMoveRequest
from file_move.file_move_result import FileMoveResult


__all__ = [
    "FileMoveMCPTool",
    "FileMoveOperation",
    "FileMoveOutcome",
    "FileMoveRequest",
    "FileMoveResult",
]

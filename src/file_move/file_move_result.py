"""Result of a file move."""

from dataclasses import dataclass

from file_move.file_move_outcome import FileMoveOutcome


@dataclass(frozen=True)
class FileMoveResult:
    """Outcome kind plus a human-readable message."""
    kind: FileMoveOutcome
    message: str

    @property
    def is_error(self) -> bool:
        return self.kind not in (FileMoveOutcome.SUCCESS, FileMoveOutcome.WARNING)

    @property
    def success(self) -> bool:
        return not self.is_error

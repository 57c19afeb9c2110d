"""Move a file by copying its contents and deleting the original."""

import logging
import os

from file_move.file_move_outcome import FileMoveOutcome
from file_move.file_move_request import FileMoveRequest
from file_move.file_move_result import FileMoveResult
from project_directories import ProjectDirectories
from project_files import FilesError, FilesInterface


class FileMoveOperation:
    """
    Moves a single file within the project root.

    The move is a read, a write and a delete rather than a rename, so the
    content can exist at both locations if the final delete fails.  That case
    is reported as a warning, not an error: the copy is kept and nothing is
    rolled back.  No failure is raised to the caller; every outcome is
    returned as a FileMoveResult.
    """

    def __init__(
        self,
        files: FilesInterface,
        directories: ProjectDirectories,
        restrict_to_root: bool = True
    ) -> None:
        """
        Initialize the operation.

        Args:
            files: Filesystem access used for every read, write and delete
            directories: Project root that request paths are resolved against
            restrict_to_root: Reject paths that resolve outside the project root
        """
        self._files = files
        self._directories = directories
        self._restrict_to_root = restrict_to_root
        self._logger = logging.getLogger("FileMoveOperation")

    def move(self, request: FileMoveRequest) -> FileMoveResult:
        """
        Move the request's source file to its destination.

        Args:
            request: Paths relative to the project root and directory creation flag

        Returns:
            Result describing the outcome
        """
        source = self._directories.join(request.source)
        destination = self._directories.join(request.destination)

        if not source:
            return self._error(FileMoveOutcome.MISSING_PARAMETER, "Error: Missing source parameter")

        if not destination:
            return self._error(FileMoveOutcome.MISSING_PARAMETER, "Error: Missing destination parameter")

        if self._restrict_to_root:
            for path in (source, destination):
                if not self._directories.is_within_root(path):
                    return self._error(
                        FileMoveOutcome.PATH_OUTSIDE_ROOT,
                        f"Error: Path '{path}' is outside the project root"
                    )

        try:
            return self._move(source, destination, request.create_directory)

        except Exception as e:
            self._logger.error(
                "Error moving file '%s' to '%s': %s", source, destination, str(e), exc_info=True
            )
            return FileMoveResult(FileMoveOutcome.UNEXPECTED_FAILURE, f"Error: {str(e)}")

    def _move(self, source: str, destination: str, create_directory: bool) -> FileMoveResult:
        if not self._files.exists(source):
            return self._error(FileMoveOutcome.SOURCE_NOT_FOUND, f"Error: Source file '{source}' does not exist")

        # Writing a file onto itself and then deleting it would lose the only copy
        if source == destination:
            self._logger.info("Source and destination are both '%s'; nothing to move", source)
            return FileMoveResult(
                FileMoveOutcome.SUCCESS,
                f"Successfully moved '{source}' to '{destination}' (source and destination are the same file)"
            )

        if create_directory:
            directory = os.path.dirname(destination)
            if not self._files.exists(directory):
                self._logger.debug("Creating destination directory '%s'", directory)
                if not self._files.ensure_directory(directory):
                    return self._error(
                        FileMoveOutcome.DIRECTORY_CREATE_FAILED,
                        f"Error: Could not create directory '{directory}'"
                    )

        try:
            content = self._files.read(source)

        except FilesError as e:
            self._logger.debug("Read failed for '%s': %s", source, str(e))
            return self._error(FileMoveOutcome.READ_FAILED, f"Error: Could not read source file '{source}'")

        if not self._files.write(destination, content):
            return self._error(
                FileMoveOutcome.WRITE_FAILED,
                f"Error: Could not write to destination file '{destination}'"
            )

        if not self._files.delete(source):
            self._logger.warning("Copied '%s' to '%s' but could not delete the source", source, destination)
            return FileMoveResult(
                FileMoveOutcome.WARNING,
                f"Warning: File copied to '{destination}' but could not delete source file '{source}'"
            )

        self._logger.info("Moved '%s' to '%s'", source, destination)
        return FileMoveResult(FileMoveOutcome.SUCCESS, f"Successfully moved '{source}' to '{destination}'")

    def _error(self, kind: FileMoveOutcome, message: str) -> FileMoveResult:
        self._logger.info("File move failed (%s): %s", kind.value, message)
        return FileMoveResult(kind, message)

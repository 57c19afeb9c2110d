from enum import Enum


class FileMoveOutcome(Enum):
    """Enumeration of possible file move outcomes."""
    SUCCESS = "success"
    WARNING = "warning"  # Copied, but the source could not be deleted
    MISSING_PARAMETER = "missing_parameter"
    PATH_OUTSIDE_ROOT = "path_outside_root"
    SOURCE_NOT_FOUND = "source_not_found"
    DIRECTORY_CREATE_FAILED = "directory_create_failed"
    READ_FAILED = "read_failed"
    WRITE_FAILED = "write_failed"
    UNEXPECTED_FAILURE = "unexpected_failure"

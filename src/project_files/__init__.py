"""Filesystem access used by project tools."""

from project_files.files_error import FilesError, FilesReadError
from project_files.files_interface import FilesInterface
from project_files.local_files import LocalFiles


__all__ = [
    "FilesError",
    "FilesInterface",
    "FilesReadError",
    "LocalFiles",
]

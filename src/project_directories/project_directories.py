"""Resolution of project-relative paths."""

import os


class ProjectDirectories:
    """
    Holds the configured project root and joins relative paths against it.

    The root is fixed for the lifetime of the instance.
    """

    def __init__(self, root_path: str) -> None:
        """
        Initialize with the project root.

        Args:
            root_path: Root directory; `~` is expanded and relative paths are made absolute

        Raises:
            ValueError: If root_path is empty
        """
        if not root_path:
            raise ValueError("Project root path must not be empty")

        self._root_path = os.path.normpath(os.path.abspath(os.path.expanduser(root_path)))

    @property
    def root_path(self) -> str:
        """Absolute, normalised project root."""
        return self._root_path

    def join(self, path: str) -> str:
        """
        Join a project-relative path onto the root.

        A leading separator is taken to mean the root of the project.

        Args:
            path: Path relative to the project root

        Returns:
            Normalised absolute path, or an empty string if `path` is empty
        """
        if not path or not path.strip():
            return ""

        path = path.lstrip(os.sep)
        if os.altsep:
            path = path.lstrip(os.altsep)

        return os.path.normpath(os.path.join(self._root_path, path))

    def is_within_root(self, path: str) -> bool:
        """
        Check whether an absolute path lies at or below the project root.

        Args:
            path: Absolute path to check

        Returns:
            True if the path is inside the root
        """
        abs_path = os.path.normpath(os.path.abspath(path))
        try:
            return os.path.commonpath([abs_path, self._root_path]) == self._root_path

        except ValueError:
            # Different drives on Windows
            return False


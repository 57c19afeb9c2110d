"""Project root configuration."""

from project_directories.project_directories import ProjectDirectories
from project_directories.project_settings import ProjectSettings
from project_directories.project_settings_error import ProjectSettingsError


__all__ = [
    "ProjectDirectories",
    "ProjectSettings",
    "ProjectSettingsError",
]

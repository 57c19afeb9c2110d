from dataclasses import dataclass
import json
import logging
import os
from typing import Any, Dict

from project_directories.project_settings_error import ProjectSettingsError


@dataclass
class ProjectSettings:
    """
    Settings for the project tools.

    This class handles the loading and saving of settings to a JSON file.
    """
    root_path: str
    restrict_to_root: bool = True
    log_level: str = "INFO"

    @classmethod
    def create_default(cls) -> "ProjectSettings":
        """Create settings rooted at the current working directory."""
        return cls(root_path=os.getcwd())

    @classmethod
    def load(cls, path: str) -> "ProjectSettings":
        """
        Load settings from a JSON file.

        Raises:
            ProjectSettingsError: If the file cannot be read or parsed
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

        except (OSError, json.JSONDecodeError) as e:
            raise ProjectSettingsError(f"Failed to load settings from '{path}': {str(e)}") from e

        if not isinstance(data, dict):
            raise ProjectSettingsError(f"Settings file '{path}' must contain a JSON object")

        project = cls._get_section(path, data, "project")
        logging_settings = cls._get_section(path, data, "logging")

        root_path = project.get("rootPath", os.getcwd())
        if not isinstance(root_path, str) or not root_path:
            raise ProjectSettingsError(f"'project.rootPath' in '{path}' must be a non-empty string")

        restrict_to_root = project.get("restrictToRoot", True)
        if not isinstance(restrict_to_root, bool):
            raise ProjectSettingsError(f"'project.restrictToRoot' in '{path}' must be true or false")

        return cls(
            root_path=root_path,
            restrict_to_root=restrict_to_root,
            log_level=cls.check_log_level(logging_settings.get("level", "INFO"))
        )

    @staticmethod
    def check_log_level(level: Any) -> str:
        """
        Validate a log level name.

        Args:
            level: Level name such as "INFO" or "debug"

        Returns:
            Upper-case level name

        Raises:
            ProjectSettingsError: If the level is not a known logging level
        """
        if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
            raise ProjectSettingsError(f"Unknown log level: {level}")

        return level.upper()

    @staticmethod
    def _get_section(path: str, data: Dict[str, Any], key: str) -> Dict[str, Any]:
        section = data.get(key, {})
        if not isinstance(section, dict):
            raise ProjectSettingsError(f"'{key}' in '{path}' must be a JSON object")

        return section

    def save(self, path: str) -> None:
        """Save settings to a JSON file."""
        data = {
            "project": {
                "rootPath": self.root_path,
                "restrictToRoot": self.restrict_to_root,
            },
            "logging": {
                "level": self.log_level,
            },
        }
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4)

        except OSError as e:
            raise ProjectSettingsError(f"Failed to save settings to '{path}': {str(e)}") from e

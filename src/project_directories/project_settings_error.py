class ProjectSettingsError(Exception):
    """Raised when project settings cannot be loaded or saved."""

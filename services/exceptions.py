# services/exceptions.py


class MigrationError(Exception):
    """Base exception for run-level migration failures."""


class ConfigError(MigrationError):
    """Raised when the run configuration is missing or invalid."""


class InputFileError(MigrationError):
    """Raised when the input CSV is missing or unreadable. Aborts the whole run."""
    def __init__(self, path, original_exception=None):
        self.path = path
        self.original_exception = original_exception
        reason = "file not found" if isinstance(original_exception, FileNotFoundError) else "file unreadable"
        details = f": {original_exception}" if original_exception else ""
        super().__init__(f"Input {reason} ({path}){details}")

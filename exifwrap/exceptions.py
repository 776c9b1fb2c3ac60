"""
Custom exception hierarchy for the exiftool adapter.

Every failure is raised to the immediate caller as one of these types so it
can be told apart with a plain ``except`` clause.
"""


class ExifWrapError(Exception):
    """Base exception for all exifwrap errors."""
    pass


class PathNotFoundError(ExifWrapError, FileNotFoundError):
    """Raised when the resolved input path does not exist."""
    pass


class PathInaccessibleError(ExifWrapError):
    """Raised when the input path cannot be checked (too long, no permission...)."""
    pass


class EnvironmentUnavailableError(ExifWrapError):
    """Raised when the current working directory cannot be determined."""
    pass


class ToolNotInstalledError(ExifWrapError):
    """Raised when exiftool cannot be found on the search path."""
    pass


class LaunchFailedError(ExifWrapError):
    """Raised when the exiftool process could not be started."""
    pass


class ExecutionFailedError(ExifWrapError):
    """Raised when exiftool started but exited with a failure status."""

    def __init__(self, message, returncode=None, record=None):
        super().__init__(message)
        self.returncode = returncode
        # Whatever was parsed before the tool failed
        self.record = record


class UnknownFieldError(ExifWrapError):
    """Raised when a requested field is absent from a record."""

    def __init__(self, field):
        super().__init__(f"Unknown exiftool field: {field}")
        self.field = field


class TimestampError(ExifWrapError):
    """Base for capture date lookup failures."""
    pass


class TimestampFieldMissingError(TimestampError):
    """Raised when none of the capture date fields are present."""
    pass


class TimestampFormatError(TimestampError):
    """Raised when a capture date value matches none of the known formats."""

    def __init__(self, value):
        super().__init__(f"Date has unexpected format: {value}")
        self.value = value

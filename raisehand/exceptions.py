"""Errors raised while building the raise-hand dashboard data.

Only problems that stop a run are raised: a missing notes directory and
output files that cannot be written or read back. Unreadable notes and
tags without winners are logged as warnings instead.
"""

from typing import Any


class RaiseHandError(Exception):
    """A run-stopping failure, reported by the CLI with exit status 1.

    ``error_data`` holds the paths and parameters involved and is logged
    as structured context; ``suggestion`` is printed under the message.
    """

    def __init__(
        self,
        message: str,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_data = error_data or {}
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message}\nSuggestion: {self.suggestion}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Fields for the ``run_failed`` log event."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_data": self.error_data,
            "suggestion": self.suggestion,
        }


class ConfigurationError(RaiseHandError):
    """Invalid configuration or CLI arguments.

    Examples:
        - Source notes directory does not exist
        - Source path points at a file instead of a directory
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        path: str | None = None,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize configuration error.

        Args:
            message: Human-readable error message.
            parameter: Parameter name that's invalid.
            path: Offending filesystem path, if any.
            error_data: Additional context.
            suggestion: How to resolve the error.
        """
        data = error_data or {}
        data.update({"parameter": parameter, "path": path})

        default_suggestion = suggestion or (
            f"Pass an existing directory as {parameter} "
            f"or set it through the environment."
            if parameter
            else "Check the command-line arguments and configuration."
        )

        super().__init__(message, data, default_suggestion)
        self.parameter = parameter
        self.path = path


class StorageError(RaiseHandError):
    """Reading or writing the JSON output files failed.

    Examples:
        - Output directory cannot be created
        - An output file is missing or not valid JSON when loading
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize storage error.

        Args:
            message: Human-readable error message.
            path: File or directory that failed.
            error_data: Additional context.
            suggestion: How to resolve the error.
        """
        data = error_data or {}
        data.update({"path": path})

        default_suggestion = suggestion or (
            "Check that the output directory is writable "
            "and that a previous run produced all output files."
        )

        super().__init__(message, data, default_suggestion)
        self.path = path

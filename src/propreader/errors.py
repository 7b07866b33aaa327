"""Error hierarchy for the propreader package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "PropertiesError",
    "FileReadError",
    "ImmutablePropertyError",
    "PropertiesValidationError",
    "ErrorCodes",
]


class PropertiesError(Exception):
    """Base error for all propreader errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class FileReadError(PropertiesError):
    """Raised when a properties file cannot be read or decoded."""

    def __init__(self, file_path: str, **kwargs: Any) -> None:
        cause = kwargs.get("cause")
        reason = f": {cause}" if cause is not None else ""
        super().__init__(
            code="FILE_READ_ERROR",
            message=f"Cannot read properties file '{file_path}'{reason}",
            details={"file_path": file_path},
            **kwargs,
        )

    @property
    def file_path(self) -> str:
        """The path that failed to load."""
        return self.details["file_path"]


class ImmutablePropertyError(PropertiesError, AttributeError):
    """Raised when assigning to a read-only attribute such as ``length``."""

    def __init__(self, property_name: str, **kwargs: Any) -> None:
        super().__init__(
            code="IMMUTABLE_PROPERTY",
            message=f"Cannot set '{property_name}': property is read-only",
            details={"property_name": property_name},
            **kwargs,
        )

    @property
    def property_name(self) -> str:
        """The attribute the caller tried to assign."""
        return self.details["property_name"]


class PropertiesValidationError(PropertiesError):
    """Raised when the nested properties tree does not fit a bound model."""

    def __init__(
        self,
        message: str = "Properties validation failed",
        errors: list[Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="PROPERTIES_VALIDATION_ERROR",
            message=message,
            details={"errors": errors or []},
            **kwargs,
        )

    @property
    def errors(self) -> list[Any]:
        """Per-field error details."""
        return self.details["errors"]


class ErrorCodes:
    """All propreader error codes as constants.

    Example:
        if error.code == ErrorCodes.FILE_READ_ERROR:
            fall_back_to_defaults()
    """

    FILE_READ_ERROR = "FILE_READ_ERROR"
    IMMUTABLE_PROPERTY = "IMMUTABLE_PROPERTY"
    PROPERTIES_VALIDATION_ERROR = "PROPERTIES_VALIDATION_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")

"""propreader - INI-style .properties parsing with flat and nested views."""

from __future__ import annotations

from pathlib import Path

# Store
from propreader.reader import PropertiesReader

# Values
from propreader.values import Value, coerce_value, is_numeric

# Binding
from propreader.binding import ValidationErrorDetail

# Errors
from propreader.errors import (
    ErrorCodes,
    FileReadError,
    ImmutablePropertyError,
    PropertiesError,
    PropertiesValidationError,
)

__version__ = "0.1.0"

__all__ = [
    # Store
    "PropertiesReader",
    "properties_reader",
    # Values
    "Value",
    "coerce_value",
    "is_numeric",
    # Binding
    "ValidationErrorDetail",
    # Errors
    "ErrorCodes",
    "PropertiesError",
    "FileReadError",
    "ImmutablePropertyError",
    "PropertiesValidationError",
]


def properties_reader(source_file: str | Path | None = None, encoding: str = "utf-8") -> PropertiesReader:
    """Create a PropertiesReader, reading ``source_file`` when one is given."""
    return PropertiesReader(source_file, encoding=encoding)

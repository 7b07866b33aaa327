"""Shared fixtures for the propreader test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from propreader import PropertiesReader

SAMPLE_TEXT = """
a = 1
[db]
host=localhost
enabled=true
flag
"""


@pytest.fixture
def sample_text() -> str:
    """The canonical mixed-section sample input."""
    return SAMPLE_TEXT


@pytest.fixture
def reader(sample_text: str) -> PropertiesReader:
    """A reader populated from the sample input."""
    return PropertiesReader().read(sample_text)


@pytest.fixture
def properties_file(tmp_path: Path, sample_text: str) -> Path:
    """Write the sample input to a file and return its path."""
    path = tmp_path / "app.properties"
    path.write_text(sample_text, encoding="utf-8")
    return path

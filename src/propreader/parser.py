"""Line parser for INI-style properties text.

Each line is stripped and classified as blank, a section header such as
``[db]``, or a ``key=value`` assignment. Section headers prefix the keys that
follow them until the next header or the end of the text. Nothing in here
raises on malformed input: lines that fit no pattern are skipped.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from propreader.reader import PropertiesReader

__all__ = ["SECTION_PATTERN", "PROPERTY_PATTERN", "iter_lines", "read_into"]

logger = logging.getLogger(__name__)

SECTION_PATTERN = re.compile(r"\[([a-zA-Z0-9]+)\]")
PROPERTY_PATTERN = re.compile(r"([^=]+)(=?)(.*)")


def _classify(line: str, section: str) -> tuple[str, tuple[str, str] | None]:
    """Classify one line under the active ``section``.

    Returns the section active after this line, and the ``(key, value)`` pair
    the line assigns or None.
    """
    line = line.strip()
    if not line:
        return section, None

    header = SECTION_PATTERN.fullmatch(line)
    if header:
        logger.debug("Entering section '%s'", header.group(1))
        return header.group(1), None

    prop = PROPERTY_PATTERN.fullmatch(line)
    if prop is None:
        logger.debug("Skipping unrecognised line: %r", line)
        return section, None

    key = prop.group(1).strip()
    if section:
        key = f"{section}.{key}"
    return section, (key, prop.group(3).strip())


def iter_lines(text: Any) -> Iterator[tuple[str, str]]:
    """Yield the ``(key, raw_value)`` assignments found in ``text``, in order.

    The section context starts empty on every call.
    """
    section = ""
    for line in str(text).split("\n"):
        section, pair = _classify(line, section)
        if pair is not None:
            yield pair


def read_into(store: PropertiesReader, text: Any) -> PropertiesReader:
    """Parse ``text`` and ``set`` every assignment on ``store``."""
    count = 0
    for key, value in iter_lines(text):
        store.set(key, value)
        count += 1
    logger.debug("Read %d properties (%d keys stored)", count, store.length)
    return store

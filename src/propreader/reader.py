"""PropertiesReader: flat and nested storage for parsed properties."""

from __future__ import annotations

import inspect
import logging
from functools import partial
from pathlib import Path
from typing import Any, Callable, Iterator

from pydantic import BaseModel

from propreader.binding import bind_tree
from propreader.errors import FileReadError, ImmutablePropertyError
from propreader.parser import read_into
from propreader.tree import NestedTree, insert, lookup
from propreader.values import Value, coerce_value

__all__ = ["PropertiesReader"]

logger = logging.getLogger(__name__)


def _scoped(fn: Callable[..., Any], scope: Any) -> Callable[..., Any]:
    """Bind ``scope`` as the first argument when ``fn`` accepts a receiver."""
    if scope is None:
        return fn
    try:
        inspect.signature(fn).bind(scope, None, None)
    except (TypeError, ValueError):
        return fn
    return partial(fn, scope)


class PropertiesReader:
    """Key/value store populated from ``.properties`` text.

    Every value is held twice: once in a flat mapping under its full dotted
    key (``db.host``) and once in a nested tree (``{"db": {"host": ...}}``).
    Reading is permissive and never raises on malformed text.

    Instances are not thread-safe; callers sharing one must serialize
    ``set`` and ``read``.
    """

    def __init__(self, source_file: str | Path | None = None, encoding: str = "utf-8") -> None:
        self._properties: dict[str, Value] = {}
        self._properties_expanded: NestedTree = {}
        if source_file:
            self.read(self._load(source_file, encoding))

    @staticmethod
    def _load(source_file: str | Path, encoding: str) -> str:
        path = Path(source_file)
        logger.debug("Loading properties from %s", path)
        try:
            return path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(file_path=str(source_file), cause=e) from e

    @property
    def length(self) -> int:
        """Number of distinct keys in the store. Read-only."""
        return len(self._properties)

    @length.setter
    def length(self, value: int) -> None:
        raise ImmutablePropertyError(property_name="length")

    def read(self, text: Any) -> PropertiesReader:
        """Parse ``text`` into this store and return self.

        Entries from earlier reads are kept; keys seen again are overwritten.
        The active section always starts empty.
        """
        return read_into(self, text)

    def get(self, key: str, default: Value | None = None) -> Value | None:
        """Return the value stored under the full flat ``key``, or ``default``."""
        return self._properties.get(key, default)

    def set(self, key: str, value: Any) -> PropertiesReader:
        """Coerce ``value`` and store it under ``key`` in both views."""
        return self._store(key, coerce_value(value))

    def _store(self, key: str, value: Value) -> PropertiesReader:
        self._properties[key] = value
        insert(self._properties_expanded, key, value)
        return self

    def each(self, fn: Callable[..., Any], scope: Any = None) -> PropertiesReader:
        """Call ``fn(key, value)`` for every stored property.

        When ``scope`` is given and ``fn`` takes a receiver before the key and
        value, ``scope`` is passed as that first argument, so an unbound method
        can be used as ``each(Cls.method, instance)``. Callables taking only
        ``(key, value)`` ignore ``scope``.
        """
        call = _scoped(fn, scope)
        for key, value in list(self._properties.items()):
            call(key, value)
        return self

    def path(self, key: str | None = None) -> Any:
        """Return the nested tree, or the node at dotted ``key`` within it.

        WARNING: this is the live internal structure, not a copy. Mutating it
        changes what later ``path()`` calls return but never touches the flat
        store behind ``get``.
        """
        if key is None:
            return self._properties_expanded
        return lookup(self._properties_expanded, key)

    def clone(self) -> PropertiesReader:
        """Return an independent reader holding the same properties."""
        copy = PropertiesReader()
        self.each(PropertiesReader._store, copy)
        return copy

    def bind(self, model: type[BaseModel], strict: bool = False) -> BaseModel:
        """Validate the nested tree into an instance of ``model``."""
        return bind_tree(self._properties_expanded, model, strict=strict)

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._properties))

    def __repr__(self) -> str:
        return f"PropertiesReader(length={self.length})"

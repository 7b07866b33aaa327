"""Nested tree view of dotted property keys."""

from __future__ import annotations

from typing import Any, Union

from propreader.values import Value

__all__ = ["NestedTree", "insert", "lookup"]

NestedTree = dict[str, Union["NestedTree", Value]]


def insert(tree: NestedTree, key: str, value: Value) -> None:
    """Set ``value`` at the dot-path ``key``, creating intermediate nodes.

    Existing intermediate mappings are reused. A leaf standing where an
    intermediate node is needed is replaced by a new mapping, and the final
    segment overwrites whatever it held, so prefix collisions such as ``a``
    and ``a.b`` resolve to whichever key was set last.
    """
    *parents, leaf = key.split(".")
    node = tree
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[leaf] = value


def lookup(tree: NestedTree, key: str, default: Any = None) -> Any:
    """Follow the dot-path ``key`` from ``tree`` and return the node found there."""
    current: Any = tree
    for part in key.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return default
    return current

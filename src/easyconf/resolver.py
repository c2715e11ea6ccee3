"""Dotted path lookups over decoded configuration trees.

A path such as ``"companies.acme.users.0.name"`` is split on ``.`` and
walked one segment at a time.  Mappings are indexed by key and sequences by
decimal index, so the same walk handles any mix of the two.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

__all__ = ["MISSING", "describe", "resolve", "resolve_first", "split_path"]

KeyPath = tuple[str, ...]

_INDEX_RX = re.compile(r"[0-9]+")


class _Missing:
    """Marker for a path that did not resolve."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def split_path(path: str | KeyPath) -> KeyPath:
    if isinstance(path, tuple):
        return path
    if path == "":
        return ()
    return tuple(path.split("."))


def _is_sequence(node: Any) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def resolve(tree: Any, path: str | KeyPath) -> Any:
    """Return the value at *path* in *tree*, or :data:`MISSING`."""
    node = tree
    for segment in split_path(path):
        if isinstance(node, Mapping):
            if segment not in node:
                return MISSING
            node = node[segment]
        elif _is_sequence(node) and _INDEX_RX.fullmatch(segment):
            index = int(segment)
            if index >= len(node):
                return MISSING
            node = node[index]
        else:
            return MISSING
    return node


def resolve_first(tree: Any, paths: Iterable[str | KeyPath]) -> tuple[str | KeyPath | None, Any]:
    """Return ``(path, value)`` for the first of *paths* that resolves.

    ``(None, MISSING)`` is returned when none of them do.
    """
    for path in paths:
        value = resolve(tree, path)
        if value is not MISSING:
            return path, value
    return None, MISSING


def describe(paths: Iterable[str | KeyPath]) -> str:
    return " | ".join(p if isinstance(p, str) else ".".join(p) for p in paths)

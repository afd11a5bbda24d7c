"""Dot-separated key paths over nested configuration mappings."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

Value = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]
Document = Dict[str, Value]

_MISSING = object()


def split_path(path: str) -> List[str]:
    if not path:
        raise ValueError("Key path must not be empty")
    parts = path.split(".")
    if "" in parts:
        raise ValueError(f"Key path {path!r} has an empty segment")
    return parts


def _lookup(document: Document, path: str) -> Any:
    node: Any = document
    for part in split_path(path):
        if not isinstance(node, dict):
            return _MISSING
        node = node.get(part, _MISSING)
        if node is _MISSING:
            return _MISSING
    return node


def get_path(document: Document, path: str) -> Optional[Value]:
    """Return the value stored under ``path`` or ``None`` when any segment is missing.

    Reaching a scalar before the last segment is treated as a miss as well.
    """
    node = _lookup(document, path)
    return None if node is _MISSING else node


def has_path(document: Document, path: str) -> bool:
    return _lookup(document, path) is not _MISSING


def set_path(document: Document, path: str, value: Value) -> Document:
    """Return a copy of ``document`` with ``value`` stored under ``path``.

    Mappings along the path are copied, missing or non-mapping intermediates are
    replaced with empty mappings, and the input document is left untouched.
    """
    parts = split_path(path)
    root: Document = dict(document)
    node = root
    for part in parts[:-1]:
        child = node.get(part)
        child = dict(child) if isinstance(child, dict) else {}
        node[part] = child
        node = child
    node[parts[-1]] = value
    return root

"""Value kinds stored inside layer trees.

Contents:
    * :data:`UNDEFINED` - sentinel for "no value at this path" (distinct from ``None``).
    * :class:`NodeKind` - tagged variant describing a stored value.
    * :func:`classify` - map a Python value onto its :class:`NodeKind`.
    * :func:`deep_copy_tree` - structural copy of a layer tree.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final


class _Undefined:
    """Singleton type of :data:`UNDEFINED`."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()
"""Marker for a path that resolves to nothing.

Returned by :meth:`Layer.get_node` for missing nodes and accepted by
``set`` as the value that deletes a node. ``None`` is a regular stored value.

Example:
    >>> UNDEFINED is _Undefined()
    True
    >>> bool(UNDEFINED)
    False
"""


class NodeKind(str, Enum):
    """Kind of a value stored in a layer tree.

    Only :attr:`MAPPING` nodes can be descended into or created as
    intermediate nodes; every other kind is a leaf.

    Example:
        >>> NodeKind.MAPPING.value
        'mapping'
        >>> NodeKind.NULL == "null"
        True
    """

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    MAPPING = "mapping"
    ARRAY = "array"
    OPAQUE = "opaque"


def classify(value: object) -> NodeKind:
    """Return the :class:`NodeKind` of *value*.

    ``bool`` is checked before numbers because it subclasses ``int``. Only
    ``dict`` counts as a mapping; other ``Mapping`` implementations are opaque
    leaves.

    Example:
        >>> classify({"a": 1})
        <NodeKind.MAPPING: 'mapping'>
        >>> classify(True)
        <NodeKind.BOOL: 'bool'>
        >>> classify(3.5)
        <NodeKind.NUMBER: 'number'>
        >>> classify(None)
        <NodeKind.NULL: 'null'>
        >>> classify(["x"])
        <NodeKind.ARRAY: 'array'>
        >>> classify(object()).value
        'opaque'
    """
    if value is None:
        return NodeKind.NULL
    if isinstance(value, bool):
        return NodeKind.BOOL
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, dict):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    return NodeKind.OPAQUE


def is_mapping(value: object) -> bool:
    """Return ``True`` when *value* is a node that can hold children."""
    return classify(value) is NodeKind.MAPPING


def deep_copy_tree(value: Any) -> Any:
    """Copy mappings and arrays recursively; leaves are shared.

    Mappings become plain ``dict`` and tuples stay tuples so the copy keeps
    the original kinds. Opaque leaves are not copied.

    Example:
        >>> source = {"a": {"b": [1, {"c": 2}]}}
        >>> clone = deep_copy_tree(source)
        >>> clone == source, clone["a"] is source["a"], clone["a"]["b"][1] is source["a"]["b"][1]
        (True, False, False)
    """
    kind = classify(value)
    if kind is NodeKind.MAPPING:
        return {key: deep_copy_tree(item) for key, item in value.items()}
    if kind is NodeKind.ARRAY:
        items = [deep_copy_tree(item) for item in value]
        return tuple(items) if isinstance(value, tuple) else items
    return value


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Return a new mapping with *overlay* merged over *base*.

    Nested mappings merge key by key; any other value in *overlay* replaces
    the value in *base*. Neither argument is modified.

    Example:
        >>> deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}, "c": None})
        {'a': {'x': 1, 'y': 3}, 'b': 1, 'c': None}
    """
    merged = deep_copy_tree(base)
    for key, value in overlay.items():
        current = merged.get(key, UNDEFINED)
        if is_mapping(current) and is_mapping(value):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = deep_copy_tree(value)
    return merged


__all__ = [
    "UNDEFINED",
    "NodeKind",
    "classify",
    "deep_copy_tree",
    "deep_merge",
    "is_mapping",
]

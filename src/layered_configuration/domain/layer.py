"""A single named configuration layer owning one mapping tree."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .values import UNDEFINED, deep_copy_tree, is_mapping


class Layer:
    """Named configuration tree addressed by pre-split paths.

    The layer owns its data: input is deep-copied on construction so later
    changes to the caller's mapping never leak into the configuration.

    Attributes:
        name: Layer name (already normalized by the owning configuration).
        data: Root mapping of the layer tree.
        write_to_disk: Whether directory-wide saves include this layer.

    Example:
        >>> source = {"server": {"port": 80}}
        >>> layer = Layer("defaults", source)
        >>> layer.get_node(["server", "port"])
        80
        >>> source["server"]["port"] = 8080
        >>> layer.get_node(["server", "port"])
        80
        >>> layer.set_node(["server", "host"], "localhost")
        >>> layer.data
        {'server': {'port': 80, 'host': 'localhost'}}
    """

    __slots__ = ("name", "data", "write_to_disk")

    def __init__(self, name: str, data: Mapping[str, Any] | None = None, write_to_disk: bool = False) -> None:
        self.name = name
        self.data: dict[str, Any] = deep_copy_tree(data) if data is not None else {}
        self.write_to_disk = bool(write_to_disk)

    def __repr__(self) -> str:
        return f"Layer(name={self.name!r}, write_to_disk={self.write_to_disk!r})"

    def clear(self) -> None:
        """Drop all data stored in this layer."""
        self.data = {}

    def get_node(self, segments: Sequence[str]) -> Any:
        """Return the value stored at *segments* or :data:`UNDEFINED`.

        Every step must land on a mapping that has the next segment as a key;
        otherwise the lookup stops with :data:`UNDEFINED`. Blank segments are
        skipped. An empty segment list returns the root mapping.

        Example:
            >>> layer = Layer("one", {"a": {"b": None}, "c": 1})
            >>> layer.get_node(["a", "b"]) is None
            True
            >>> layer.get_node(["c", "d"])
            UNDEFINED
            >>> layer.get_node(["a"])
            {'b': None}
        """
        context: Any = self.data
        for segment in segments:
            if not isinstance(segment, str) or not segment.strip():
                continue
            if not is_mapping(context) or segment not in context:
                return UNDEFINED
            context = context[segment]
        return context

    def set_node(self, segments: Sequence[str], value: Any) -> None:
        """Store *value* at *segments*, creating intermediate mappings.

        Intermediate values that are not mappings are replaced by empty
        mappings. Passing :data:`UNDEFINED` as *value* deletes the node and
        its subtree. An empty segment list is a no-op.

        Example:
            >>> layer = Layer("one", {"a": 5})
            >>> layer.set_node(["a", "b"], True)
            >>> layer.data
            {'a': {'b': True}}
            >>> layer.set_node(["a", "b"], UNDEFINED)
            >>> layer.data
            {'a': {}}
        """
        keys = [segment for segment in segments if isinstance(segment, str) and segment.strip()]
        if not keys:
            return
        context = self.data
        for key in keys[:-1]:
            child = context.get(key, UNDEFINED)
            if not is_mapping(child):
                child = {}
                context[key] = child
            context = child
        terminal = keys[-1]
        if value is UNDEFINED:
            context.pop(terminal, None)
        else:
            context[terminal] = value


__all__ = ["Layer"]

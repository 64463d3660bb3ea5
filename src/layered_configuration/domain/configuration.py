"""Ordered stack of named layers with path-addressed reads and writes.

Contents:
    * :class:`ConfigurationState` - immutable ``(order, layers)`` value.
    * :class:`LayeredConfiguration` - layer management, ``get``/``has``/``set``.

System Role:
    Pure domain object. File and environment loading live in the adapters
    and talk to this class only through ``add_layer*``, ``get_layer``,
    ``snapshot`` and ``restore``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .errors import InvalidPathError, NoLayersError
from .layer import Layer
from .paths import DEFAULT_PATH_SEPARATOR, normalize_layer_name, split_path, validate_separator
from .values import UNDEFINED, deep_merge, is_mapping

LayerNames = str | Sequence[str]
"""A single layer name or a sequence of layer names."""


def _empty_layers() -> Mapping[str, Layer]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ConfigurationState:
    """Layer order and layer set of a configuration, replaced as one value.

    Attributes:
        order: Normalized layer names, highest priority first.
        layers: Layers keyed by normalized name.

    Example:
        >>> state = ConfigurationState()
        >>> state.order, dict(state.layers)
        ((), {})
    """

    order: tuple[str, ...] = ()
    layers: Mapping[str, Layer] = field(default_factory=_empty_layers)

    def with_layer(self, layer: Layer, index: int) -> ConfigurationState:
        """Return a new state with *layer* inserted at *index* (clamped)."""
        base = self.without((layer.name,))
        order = list(base.order)
        order.insert(index, layer.name)
        layers = dict(base.layers)
        layers[layer.name] = layer
        return ConfigurationState(tuple(order), MappingProxyType(layers))

    def without(self, names: Sequence[str]) -> ConfigurationState:
        """Return a new state lacking the given normalized names."""
        doomed = set(names)
        if not doomed.intersection(self.layers):
            return self
        order = tuple(name for name in self.order if name not in doomed)
        layers = {name: layer for name, layer in self.layers.items() if name not in doomed}
        return ConfigurationState(order, MappingProxyType(layers))


def _names_from(names: object, *, argument: str) -> list[str]:
    """Return a list of layer names from a single name or a sequence."""
    if isinstance(names, str):
        return [names]
    if isinstance(names, Sequence):
        for name in names:
            if not isinstance(name, str):
                raise TypeError(f"{argument} needs to contain only strings, got {type(name).__name__}")
        return list(names)
    raise TypeError(f"{argument} needs to be a string or a sequence of strings, got {type(names).__name__}")


def _check_index(index: object) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"layer index needs to be an integer, got {type(index).__name__}")
    return index


def _check_data(data: object) -> Mapping[str, Any] | None:
    if data is None or is_mapping(data):
        return data  # type: ignore[return-value]
    raise TypeError(f"configuration data needs to be a mapping, got {type(data).__name__}")


class LayeredConfiguration:
    """Configuration made of prioritized, named layers.

    Reads search the layers from the highest priority (index 0) downwards and
    return the first value found. Writes go to a named layer or, by default,
    to the highest-priority one.

    Example:
        >>> config = LayeredConfiguration()
        >>> _ = config.add_layer("defaults", {"server": {"port": 80, "host": "0.0.0.0"}})
        >>> _ = config.add_layer("user", {"server": {"port": 8080}})
        >>> config.get("server.port")
        8080
        >>> config.get("server.host", restrict_to_layer="user") is None
        True
        >>> config.set("server.debug", True)
        >>> config.get_layer("user").data
        {'server': {'port': 8080, 'debug': True}}
        >>> config.get_layer_names()
        ['user', 'defaults']
    """

    def __init__(self, path_separator: str = DEFAULT_PATH_SEPARATOR) -> None:
        self._state = ConfigurationState()
        self._path_separator = validate_separator(path_separator)

    def __repr__(self) -> str:
        return f"LayeredConfiguration(layers={list(self._state.order)!r}, path_separator={self._path_separator!r})"

    def __len__(self) -> int:
        return len(self._state.order)

    def __iter__(self) -> Iterator[Layer]:
        state = self._state
        return iter([state.layers[name] for name in state.order])

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_layer_name(name) in self._state.layers

    # -- paths ---------------------------------------------------------------------------------------------------

    @property
    def path_separator(self) -> str:
        """Literal separator used by :meth:`split_path`."""
        return self._path_separator

    @path_separator.setter
    def path_separator(self, separator: str) -> None:
        self._path_separator = validate_separator(separator)

    def split_path(self, path: str) -> list[str]:
        """Split *path* with the current :attr:`path_separator`.

        Example:
            >>> config = LayeredConfiguration()
            >>> config.split_path(" a ..b. ")
            ['a', 'b']
            >>> config.path_separator = "/"
            >>> config.split_path("a.b/c")
            ['a.b', 'c']
        """
        return split_path(path, self._path_separator)

    # -- state ---------------------------------------------------------------------------------------------------

    def snapshot(self) -> ConfigurationState:
        """Return the current layer order and layer set as one immutable value."""
        return self._state

    def restore(self, state: ConfigurationState) -> None:
        """Reinstall a state previously returned by :meth:`snapshot`."""
        self._state = state

    # -- reads ---------------------------------------------------------------------------------------------------

    def _candidate_names(self, restrict_to_layer: LayerNames | None) -> list[str]:
        if restrict_to_layer is None:
            return list(self._state.order)
        return [normalize_layer_name(name) for name in _names_from(restrict_to_layer, argument="restrict_to_layer")]

    def _resolve(self, path: str, ignore_nulls: bool, restrict_to_layer: LayerNames | None) -> Any:
        candidates = self._candidate_names(restrict_to_layer)
        segments = tuple(self.split_path(path))
        if not segments:
            return UNDEFINED
        layers = self._state.layers
        for name in candidates:
            layer = layers.get(name)
            if layer is None:
                continue
            value = layer.get_node(segments)
            if value is UNDEFINED or (ignore_nulls and value is None):
                continue
            return value
        return UNDEFINED

    def get(
        self,
        path: str,
        ignore_nulls: bool = False,
        restrict_to_layer: LayerNames | None = None,
        *,
        default: Any = None,
    ) -> Any:
        """Return the value at *path* from the first layer that defines it.

        Args:
            path: Separator-delimited path.
            ignore_nulls: Skip layers whose value at *path* is ``None``.
            restrict_to_layer: Layer name or names to search instead of the
                configured order. The caller's order is used as the search
                order; unknown names are skipped.
            default: Returned when no layer yields a value. Pass
                :data:`UNDEFINED` to tell a missing path from a stored ``None``.

        Returns:
            The stored value (leaf or whole branch of the answering layer), or
            *default*.

        Raises:
            TypeError: If *path* is not a string or *restrict_to_layer* is not
                a string or a sequence of strings.

        Example:
            >>> config = LayeredConfiguration()
            >>> _ = config.add_layer("one", {"a": 2, "e": "low"})
            >>> _ = config.add_layer("two", {"a": 1, "e": None})
            >>> config.get("a"), config.get("e"), config.get("e", True)
            (1, None, 'low')
            >>> config.get("a", restrict_to_layer=["one", "two"])
            2
            >>> config.get("missing", default=UNDEFINED)
            UNDEFINED
        """
        value = self._resolve(path, ignore_nulls, restrict_to_layer)
        return default if value is UNDEFINED else value

    def has(self, path: str, ignore_nulls: bool = False, restrict_to_layer: LayerNames | None = None) -> bool:
        """Return whether :meth:`get` would find a value at *path*.

        Example:
            >>> config = LayeredConfiguration()
            >>> _ = config.add_layer("one", {"a": None})
            >>> config.has("a"), config.has("a", True), config.has("b")
            (True, False, False)
        """
        return self._resolve(path, ignore_nulls, restrict_to_layer) is not UNDEFINED

    def get_merged(self, path: str = "", restrict_to_layer: LayerNames | None = None) -> Any:
        """Return the deep merge of the branch at *path* over all candidate layers.

        Lower-priority layers are merged first so higher-priority values win
        key by key. A leaf from a higher-priority layer replaces everything
        below it. An empty *path* merges the whole trees.

        Example:
            >>> config = LayeredConfiguration()
            >>> _ = config.add_layer("one", {"d": {"dd": {"ddd": True}}})
            >>> _ = config.add_layer("two", {"d": {"dd": {"ddd2": "X"}}})
            >>> config.get("d.dd")
            {'ddd2': 'X'}
            >>> config.get_merged("d.dd")
            {'ddd': True, 'ddd2': 'X'}
        """
        candidates = self._candidate_names(restrict_to_layer)
        segments = tuple(self.split_path(path))
        layers = self._state.layers
        merged: Any = UNDEFINED
        for name in reversed(candidates):
            layer = layers.get(name)
            if layer is None:
                continue
            value = layer.get_node(segments)
            if value is UNDEFINED:
                continue
            if is_mapping(merged) and is_mapping(value):
                merged = deep_merge(merged, value)
            else:
                merged = deep_merge({}, value) if is_mapping(value) else value
        return merged

    # -- writes --------------------------------------------------------------------------------------------------

    def set(self, path: str, value: Any, layer_name: str | None = None) -> None:
        """Store *value* at *path*.

        Args:
            path: Separator-delimited path with at least one segment.
            value: Value to store; :data:`UNDEFINED` deletes the node.
            layer_name: Target layer. Defaults to the highest-priority layer.
                A layer that does not exist yet is created empty at the
                highest priority.

        Raises:
            TypeError: If *path* or *layer_name* have the wrong type.
            InvalidPathError: If *path* has no usable segment.
            NoLayersError: If *layer_name* is omitted and no layer exists.

        Example:
            >>> config = LayeredConfiguration()
            >>> config.set("g.xx.yy", True, "runtime")
            >>> config.get_layer("runtime").data
            {'g': {'xx': {'yy': True}}}
        """
        if layer_name is not None and not isinstance(layer_name, str):
            raise TypeError(f"layer_name needs to be a string, got {type(layer_name).__name__}")
        segments = self.split_path(path)
        if not segments:
            raise InvalidPathError(f"path {path!r} does not contain any segment")
        if layer_name is None or not layer_name.strip():
            if not self._state.order:
                raise NoLayersError("cannot set a value without layers; add a layer first")
            layer = self._state.layers[self._state.order[0]]
        else:
            layer = self.get_layer(layer_name) or self.add_layer(layer_name)
        layer.set_node(segments, value)

    def delete(self, path: str, layer_name: str | None = None) -> None:
        """Remove the node at *path*; same targeting rules as :meth:`set`."""
        self.set(path, UNDEFINED, layer_name)

    # -- layer management ----------------------------------------------------------------------------------------

    def add_layer(self, name: str, data: Mapping[str, Any] | None = None, *, write_to_disk: bool = False) -> Layer:
        """Add a layer with the highest priority, replacing a same-named one.

        Example:
            >>> config = LayeredConfiguration()
            >>> _ = config.add_layer("one", {"a": 1})
            >>> _ = config.add_layer("two")
            >>> config.get_layer_names()
            ['two', 'one']
        """
        return self.add_layer_at(name, data, 0, write_to_disk=write_to_disk)

    def add_layer_at(
        self,
        name: str,
        data: Mapping[str, Any] | None,
        index: int,
        *,
        write_to_disk: bool = False,
    ) -> Layer:
        """Add a layer at *index* of the search order.

        An existing layer with the same (normalized) name is removed first.
        Indices past the end append the layer as lowest priority.

        Raises:
            TypeError: If *name* is not a string, *data* is not a mapping, or
                *index* is not an integer.

        Example:
            >>> config = LayeredConfiguration()
            >>> for layer_name in ("one", "two", "three"):
            ...     _ = config.add_layer(layer_name)
            >>> _ = config.add_layer_at("four", {}, 2)
            >>> _ = config.add_layer_at("five", {}, 100)
            >>> config.get_layer_names()
            ['three', 'two', 'four', 'one', 'five']
        """
        key = normalize_layer_name(name)
        checked = _check_data(data)
        position = _check_index(index)
        layer = Layer(key, checked, write_to_disk=write_to_disk)
        self._state = self._state.with_layer(layer, position)
        return layer

    def _add_layer_relative(
        self,
        name: str,
        data: Mapping[str, Any] | None,
        other_name: str,
        *,
        before: bool,
        write_to_disk: bool,
    ) -> Layer:
        if not isinstance(other_name, str):
            raise TypeError(f"other_name needs to be a string, got {type(other_name).__name__}")
        order = self._state.order
        other = normalize_layer_name(other_name)
        if other in order:
            index = order.index(other) + (0 if before else 1)
        else:
            index = 0 if before else len(order)
        # The index is taken before add_layer_at drops a layer of the same name.
        return self.add_layer_at(name, data, index, write_to_disk=write_to_disk)

    def add_layer_before(
        self,
        name: str,
        data: Mapping[str, Any] | None,
        other_name: str,
        *,
        write_to_disk: bool = False,
    ) -> Layer:
        """Add a layer directly above *other_name*, or at the top if it is unknown.

        Example:
            >>> config = LayeredConfiguration()
            >>> _ = config.add_layer("one")
            >>> _ = config.add_layer("two")
            >>> _ = config.add_layer_before("six", None, "one")
            >>> _ = config.add_layer_before("seven", None, "nonexisting")
            >>> config.get_layer_names()
            ['seven', 'two', 'six', 'one']
        """
        return self._add_layer_relative(name, data, other_name, before=True, write_to_disk=write_to_disk)

    def add_layer_after(
        self,
        name: str,
        data: Mapping[str, Any] | None,
        other_name: str,
        *,
        write_to_disk: bool = False,
    ) -> Layer:
        """Add a layer directly below *other_name*, or at the bottom if it is unknown.

        Example:
            >>> config = LayeredConfiguration()
            >>> _ = config.add_layer("one")
            >>> _ = config.add_layer("two")
            >>> _ = config.add_layer_after("eight", None, "two")
            >>> _ = config.add_layer_after("nine", None, "nonexisting")
            >>> config.get_layer_names()
            ['two', 'eight', 'one', 'nine']
        """
        return self._add_layer_relative(name, data, other_name, before=False, write_to_disk=write_to_disk)

    def remove_layer(self, names: LayerNames) -> None:
        """Remove one or more layers; unknown names are ignored.

        Raises:
            TypeError: If a name is not a string.
        """
        keys = [normalize_layer_name(name) for name in _names_from(names, argument="layer name")]
        self._state = self._state.without(keys)

    def remove_all_layers(self) -> None:
        """Remove every layer."""
        self._state = ConfigurationState()

    def clear_layer(self, names: LayerNames) -> None:
        """Empty the data of one or more layers but keep them registered.

        Raises:
            TypeError: If a name is not a string.

        Example:
            >>> config = LayeredConfiguration()
            >>> _ = config.add_layer("one", {"a": 1})
            >>> config.clear_layer(["one", "unknown"])
            >>> config.get_layer_names(), config.get_layer("one").data
            (['one'], {})
        """
        keys = [normalize_layer_name(name) for name in _names_from(names, argument="layer name")]
        layers = self._state.layers
        for key in keys:
            layer = layers.get(key)
            if layer is not None:
                layer.clear()

    def clear_all_layers(self) -> None:
        """Empty the data of every layer."""
        for layer in self._state.layers.values():
            layer.clear()

    def get_layer_names(self) -> list[str]:
        """Return the layer names from highest to lowest priority."""
        return list(self._state.order)

    def get_layer(self, name: str) -> Layer | None:
        """Return the layer registered under *name*, or ``None``.

        Raises:
            TypeError: If *name* is not a string.
        """
        return self._state.layers.get(normalize_layer_name(name))


__all__ = [
    "ConfigurationState",
    "LayerNames",
    "LayeredConfiguration",
]

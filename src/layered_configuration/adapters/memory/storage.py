"""In-memory layer storage and display for testing.

Contents:
    * :class:`LayerStoreSpy` - Layer "files" kept in a dict, with call capture.
    * :class:`DisplaySpy` - Captures rendered values and merged views.
    * :func:`load_from_environment_in_memory` - Environment loader that never
      reads ``os.environ``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...domain.configuration import LayeredConfiguration, LayerNames
from ...domain.enums import OutputFormat
from ...domain.errors import ConfigFileError, LayerNotFoundError
from ...domain.layer import Layer
from ...domain.values import UNDEFINED, deep_copy_tree
from ..codec.registry import file_format_of
from ..environment.loader import DEFAULT_ENVIRONMENT_LAYER, EnvironmentOptions, load_from_environment


def _empty_documents() -> dict[Path, dict[str, Any]]:
    return {}


def _empty_records() -> list[dict[str, Any]]:
    return []


@dataclass
class LayerStoreSpy:
    """Layer documents keyed by file path, loaded and saved without disk I/O.

    Each test should create its own spy. ``documents`` can be seeded before
    the code under test runs and inspected afterwards.

    Attributes:
        documents: Decoded layer documents keyed by their (virtual) file path.
        saved: Paths written by :meth:`save_to_file`, in call order.
        broken: Paths whose load raises :class:`ConfigFileError`.

    Example:
        >>> spy = LayerStoreSpy({Path("conf/base.hjson"): {"a": 1}})
        >>> config = LayeredConfiguration()
        >>> [layer.name for layer in spy.load_from_directory(config, "conf")]
        ['base']
        >>> config.set("a", 2)
        >>> spy.save_to_file(config, "base", Path("conf/base.hjson")).name
        'base.hjson'
        >>> spy.documents[Path("conf/base.hjson")]
        {'a': 2}
    """

    documents: dict[Path, dict[str, Any]] = field(default_factory=_empty_documents)
    saved: list[Path] = field(default_factory=list)
    broken: set[Path] = field(default_factory=set)

    def load_from_file(
        self, configuration: LayeredConfiguration, file_path: str | Path, layer_name: str | None = None
    ) -> Layer:
        """Add the document stored at *file_path* as the highest priority layer."""
        path = Path(file_path)
        if path in self.broken or path not in self.documents:
            raise ConfigFileError("cannot read configuration file", path)
        name = layer_name if layer_name is not None else path.stem
        previous = configuration.get_layer(name)
        write_to_disk = previous.write_to_disk if previous is not None else False
        return configuration.add_layer(name, self.documents[path], write_to_disk=write_to_disk)

    def save_to_file(self, configuration: LayeredConfiguration, layer_name: str, file_path: str | Path) -> Path:
        """Store a copy of the layer data under *file_path*."""
        layer = configuration.get_layer(layer_name)
        if layer is None:
            raise LayerNotFoundError(layer_name)
        path = Path(file_path)
        self.documents[path] = deep_copy_tree(layer.data)
        self.saved.append(path)
        return path

    def load_from_directory(self, configuration: LayeredConfiguration, directory: str | Path) -> list[Layer]:
        """Load every stored document directly inside *directory*, all or nothing."""
        root = Path(directory)
        paths = sorted(
            (path for path in {*self.documents, *self.broken} if path.parent == root and file_format_of(path)),
            key=lambda path: path.name,
        )
        snapshot = configuration.snapshot()
        loaded: dict[str, Layer] = {}
        try:
            for path in paths:
                layer = self.load_from_file(configuration, path)
                loaded.pop(layer.name, None)
                loaded[layer.name] = layer
        except BaseException:
            configuration.restore(snapshot)
            raise
        return list(loaded.values())

    def save_to_directory(self, configuration: LayeredConfiguration, directory: str | Path) -> list[Path]:
        """Store every ``write_to_disk`` layer as ``<directory>/<layer>.hjson``."""
        root = Path(directory)
        return [
            self.save_to_file(configuration, layer.name, root / f"{layer.name}.hjson")
            for layer in configuration
            if layer.write_to_disk
        ]


@dataclass
class DisplaySpy:
    """Captures display calls for test assertions.

    Example:
        >>> spy = DisplaySpy()
        >>> spy.display_value(8080, output_format=OutputFormat.JSON)
        >>> spy.values
        [(8080, <OutputFormat.JSON: 'json'>)]
    """

    values: list[tuple[Any, OutputFormat]] = field(default_factory=list)
    views: list[dict[str, Any]] = field(default_factory=_empty_records)

    def clear(self) -> None:
        """Reset captured data for the next test."""
        self.values.clear()
        self.views.clear()

    def display_value(self, value: Any, *, output_format: OutputFormat = OutputFormat.HUMAN) -> None:
        """Record the value instead of printing it."""
        self.values.append((value, output_format))

    def display_layers(
        self,
        configuration: LayeredConfiguration,
        *,
        output_format: OutputFormat = OutputFormat.HUMAN,
        restrict_to_layer: LayerNames | None = None,
    ) -> None:
        """Record the merged document instead of printing it."""
        merged = configuration.get_merged("", restrict_to_layer=restrict_to_layer)
        self.views.append(
            {
                "layers": configuration.get_layer_names(),
                "document": {} if merged is UNDEFINED else merged,
                "output_format": output_format,
            }
        )


def load_from_environment_in_memory(
    configuration: LayeredConfiguration,
    options: EnvironmentOptions | None = None,
    environ: Mapping[str, str] | None = None,
    layer_name: str = DEFAULT_ENVIRONMENT_LAYER,
) -> Layer:
    """Build the environment layer from *environ* only; no variables when omitted."""
    return load_from_environment(configuration, options, {} if environ is None else environ, layer_name)


__all__ = [
    "DisplaySpy",
    "LayerStoreSpy",
    "load_from_environment_in_memory",
]

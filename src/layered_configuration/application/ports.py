"""Application ports — callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).
:class:`DocumentCodec` is the one object-shaped port: the decoder/encoder
collaborator for a single file format.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``EnvironmentOptions``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.configuration import LayeredConfiguration, LayerNames
from ..domain.enums import FileFormat, OutputFormat
from ..domain.layer import Layer

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.environment.loader import EnvironmentOptions


class DocumentCodec(Protocol):
    """Turn file text into a mapping and a mapping into file text."""

    @property
    def file_format(self) -> FileFormat: ...

    def decode(self, text: str) -> object: ...

    def encode(self, data: Mapping[str, Any]) -> str: ...


class GetConfig(Protocol):
    """Load the tool's own layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class LoadFromFile(Protocol):
    """Load one layer file into the configuration."""

    def __call__(
        self, configuration: LayeredConfiguration, file_path: str | Path, layer_name: str | None = ...
    ) -> Layer: ...


class SaveToFile(Protocol):
    """Write one layer into a file."""

    def __call__(self, configuration: LayeredConfiguration, layer_name: str, file_path: str | Path) -> Path: ...


class LoadFromDirectory(Protocol):
    """Load every recognized layer file of a directory, all or nothing."""

    def __call__(self, configuration: LayeredConfiguration, directory: str | Path) -> list[Layer]: ...


class SaveToDirectory(Protocol):
    """Write every layer flagged ``write_to_disk`` into a directory."""

    def __call__(self, configuration: LayeredConfiguration, directory: str | Path) -> list[Path]: ...


class LoadFromEnvironment(Protocol):
    """Build a layer from environment variables."""

    def __call__(
        self,
        configuration: LayeredConfiguration,
        options: EnvironmentOptions | None = ...,
        environ: Mapping[str, str] | None = ...,
        layer_name: str = ...,
    ) -> Layer: ...


class DisplayValue(Protocol):
    """Display a single resolved value in the requested format."""

    def __call__(self, value: Any, *, output_format: OutputFormat = ...) -> None: ...


class DisplayLayers(Protocol):
    """Display the merged view of a layered configuration."""

    def __call__(
        self,
        configuration: LayeredConfiguration,
        *,
        output_format: OutputFormat = ...,
        restrict_to_layer: LayerNames | None = ...,
    ) -> None: ...


class DisplayConfig(Protocol):
    """Display the tool's own configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "DisplayLayers",
    "DisplayValue",
    "DocumentCodec",
    "GetConfig",
    "InitLogging",
    "LoadFromDirectory",
    "LoadFromEnvironment",
    "LoadFromFile",
    "SaveToDirectory",
    "SaveToFile",
]

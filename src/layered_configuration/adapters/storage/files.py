"""Load and save layers as HJSON/JSON files.

Contents:
    * :func:`load_from_file` - One file into one layer.
    * :func:`save_to_file` - One layer into one file.
    * :func:`load_from_directory` - Every recognized file of a directory, all or nothing.
    * :func:`save_to_directory` - Every ``write_to_disk`` layer into ``<layer>.hjson``.

System Role:
    Adapter between the pure :class:`LayeredConfiguration` and the
    filesystem. Files are processed one after another in sorted order; a
    later file replaces the layer created by an earlier one of the same stem.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from ...domain.configuration import LayeredConfiguration
from ...domain.enums import FileFormat
from ...domain.errors import ConfigFileError, IllegalConfigurationFileError, LayerNotFoundError
from ...domain.layer import Layer
from ...domain.paths import normalize_layer_name
from ...domain.values import is_mapping
from ..codec.registry import DEFAULT_CODECS, NATIVE_FORMAT, codec_for

if TYPE_CHECKING:
    from ...application.ports import DocumentCodec

logger = logging.getLogger(__name__)


def _read_document(path: Path, codecs: Mapping[FileFormat, DocumentCodec]) -> dict[str, object]:
    """Decode *path* into a mapping or raise :class:`ConfigFileError`."""
    codec = codec_for(path, codecs)
    if codec is None:
        raise ConfigFileError(f"unsupported configuration file extension {path.suffix!r}", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigFileError(f"cannot read configuration file ({exc.strerror or exc})", path) from exc
    except UnicodeDecodeError as exc:
        raise ConfigFileError(f"configuration file is not valid UTF-8 ({exc.reason})", path) from exc
    try:
        document = codec.decode(text)
    except ValueError as exc:
        raise ConfigFileError(f"cannot parse configuration file ({exc})", path) from exc
    except RecursionError as exc:
        raise ConfigFileError("cannot parse configuration file (nested too deeply)", path) from exc
    if not is_mapping(document):
        raise IllegalConfigurationFileError("illegal configuration file, top level is not a mapping", path)
    return document  # type: ignore[return-value]


def load_from_file(
    configuration: LayeredConfiguration,
    file_path: str | Path,
    layer_name: str | None = None,
    *,
    codecs: Mapping[FileFormat, DocumentCodec] | None = None,
) -> Layer:
    """Load *file_path* into a layer with the highest priority.

    The layer is named *layer_name* or, by default, after the file name
    without extension. A layer of that name is replaced; its
    ``write_to_disk`` flag carries over to the new layer.

    Args:
        configuration: Configuration receiving the layer.
        file_path: ``.hjson`` or ``.json`` file.
        layer_name: Optional explicit layer name.
        codecs: Codec table override (tests).

    Returns:
        The newly added layer.

    Raises:
        ConfigFileError: File missing, unreadable, or not parseable.
        IllegalConfigurationFileError: File does not contain a mapping.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     _ = (Path(tmp) / "user.hjson").write_text("server: { port: 8080 }", encoding="utf-8")
        ...     config = LayeredConfiguration()
        ...     layer = load_from_file(config, Path(tmp) / "user.hjson")
        >>> layer.name, config.get("server.port")
        ('user', 8080)
    """
    path = Path(file_path)
    document = _read_document(path, codecs or DEFAULT_CODECS)
    name = layer_name if layer_name is not None else path.stem
    previous = configuration.get_layer(name)
    write_to_disk = previous.write_to_disk if previous is not None else False
    layer = configuration.add_layer(name, document, write_to_disk=write_to_disk)
    logger.debug("Loaded layer from file", extra={"layer": layer.name, "path": str(path)})
    return layer


def save_to_file(
    configuration: LayeredConfiguration,
    layer_name: str,
    file_path: str | Path,
    *,
    codecs: Mapping[FileFormat, DocumentCodec] | None = None,
) -> Path:
    """Write the data of *layer_name* into *file_path*, overwriting it.

    The codec follows the file extension; unrecognized extensions are
    written as HJSON.

    Raises:
        LayerNotFoundError: The layer does not exist.
        ConfigFileError: The data cannot be encoded or the file cannot be written.
    """
    layer = configuration.get_layer(layer_name)
    if layer is None:
        raise LayerNotFoundError(layer_name)
    path = Path(file_path)
    table = codecs or DEFAULT_CODECS
    codec = codec_for(path, table) or table[NATIVE_FORMAT]
    try:
        text = codec.encode(layer.data)
    except (TypeError, ValueError) as exc:
        raise ConfigFileError(f"cannot encode layer {layer.name!r} ({exc})", path) from exc
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ConfigFileError(f"cannot write configuration file ({exc.strerror or exc})", path) from exc
    logger.debug("Saved layer to file", extra={"layer": layer.name, "path": str(path)})
    return path


def list_layer_files(directory: str | Path) -> list[Path]:
    """Return the recognized layer files of *directory* sorted by file name.

    Raises:
        ConfigFileError: *directory* does not exist or cannot be listed.
    """
    root = Path(directory)
    if not root.is_dir():
        raise ConfigFileError("configuration directory not found", root)
    try:
        entries = list(root.iterdir())
    except OSError as exc:
        raise ConfigFileError(f"cannot list configuration directory ({exc.strerror or exc})", root) from exc
    files = [entry for entry in entries if entry.is_file() and codec_for(entry) is not None]
    return sorted(files, key=lambda entry: entry.name)


def layer_file_for(directory: str | Path, layer_name: str) -> Path:
    """Return the file a save of *layer_name* into *directory* should target.

    That is the existing file loaded last for this layer name, so the saved
    data wins on the next load, or ``<layer>.hjson`` when no file exists yet.
    File stems are normalized like layer names, so ``app.local.hjson`` is the
    file of layer ``app_local``.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     _ = (Path(tmp) / "user.json").write_text("{}", encoding="utf-8")
        ...     print(layer_file_for(tmp, "user").name, layer_file_for(tmp, "other").name)
        user.json other.hjson
    """
    root = Path(directory)
    name = normalize_layer_name(layer_name)
    files = list_layer_files(root) if root.is_dir() else []
    matches = [path for path in files if normalize_layer_name(path.stem) == name]
    if matches:
        return matches[-1]
    return root / f"{name}{NATIVE_FORMAT.value}"


def load_from_directory(
    configuration: LayeredConfiguration,
    directory: str | Path,
    *,
    codecs: Mapping[FileFormat, DocumentCodec] | None = None,
) -> list[Layer]:
    """Load every ``.hjson``/``.json`` file of *directory* into its own layer.

    Files load in alphabetical order of their names, each adding its layer at
    the highest priority; ``name.json`` therefore replaces the layer loaded
    from ``name.hjson``. Layers without a file are left untouched.

    Either every file is applied or none: on failure the configuration's
    layer order and layer set are restored before the error propagates.

    Returns:
        The layers that ended up in the configuration, in load order.

    Raises:
        ConfigFileError: The directory or one of its files cannot be loaded.
    """
    files = list_layer_files(directory)
    snapshot = configuration.snapshot()
    loaded: dict[str, Layer] = {}
    try:
        for path in files:
            layer = load_from_file(configuration, path, codecs=codecs)
            loaded.pop(layer.name, None)
            loaded[layer.name] = layer
    except BaseException as exc:
        configuration.restore(snapshot)
        logger.warning(
            "Directory load failed, configuration rolled back",
            extra={"directory": str(directory), "error": str(exc) or type(exc).__name__},
        )
        raise
    logger.info("Loaded configuration directory", extra={"directory": str(directory), "layers": list(loaded)})
    return list(loaded.values())


def save_to_directory(
    configuration: LayeredConfiguration,
    directory: str | Path,
    *,
    codecs: Mapping[FileFormat, DocumentCodec] | None = None,
) -> list[Path]:
    """Write each layer flagged ``write_to_disk`` to ``<directory>/<layer>.hjson``.

    The directory is created when missing. Writing stops at the first
    failure; files written before it are kept.

    Returns:
        Paths written, in layer priority order.

    Raises:
        ConfigFileError: The directory or a file cannot be written.
    """
    root = Path(directory)
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigFileError(f"cannot create configuration directory ({exc.strerror or exc})", root) from exc
    written: list[Path] = []
    for layer in configuration:
        if not layer.write_to_disk:
            continue
        target = root / f"{layer.name}{NATIVE_FORMAT.value}"
        written.append(save_to_file(configuration, layer.name, target, codecs=codecs))
    logger.info("Saved configuration directory", extra={"directory": str(root), "files": len(written)})
    return written


__all__ = [
    "layer_file_for",
    "list_layer_files",
    "load_from_directory",
    "load_from_file",
    "save_to_directory",
    "save_to_file",
]

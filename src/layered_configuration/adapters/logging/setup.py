"""Logging initialization shared by every entry point.

Contents:
    * :class:`LoggingConfigModel` - validated ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent lib_log_rich runtime start.

System Role:
    Library modules log through ``logging.getLogger(__name__)``; the runtime
    started here bridges those records into lib_log_rich so the CLI shows
    them with the configured console level.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from layered_configuration import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section; unknown keys pass through to RuntimeConfig.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="layconf", console_level="DEBUG").model_dump(exclude_none=True)
        {'service': 'layconf', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a lib_log_rich RuntimeConfig.

    The service name falls back to the distribution name when unset.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime once and attach stdlib logging to it.

    Later calls return immediately. ``.env`` files are enabled first so
    ``LOG_*`` variables found there take part in the runtime configuration.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]

"""Transport-independent building blocks: config, errors, logging, HAL helpers."""

from .config import Config, load_env_config
from .errors import (
    ConfigError,
    DefaultWorkspaceNotFoundError,
    OneFuseClientError,
    OneFuseDecodeError,
    OneFuseServerError,
    OneFuseTransportError,
    UnsupportedOperationError,
)
from .hal import get_embedded_list, id_segment_from_href
from .logging import LogfmtFormatter, setup_logging
from .observability import log_event

__all__ = [
    # Config
    "Config",
    "load_env_config",
    # Exceptions
    "OneFuseClientError",
    "ConfigError",
    "OneFuseTransportError",
    "OneFuseServerError",
    "OneFuseDecodeError",
    "UnsupportedOperationError",
    "DefaultWorkspaceNotFoundError",
    # HAL utilities
    "get_embedded_list",
    "id_segment_from_href",
    # Logging
    "setup_logging",
    "LogfmtFormatter",
    "log_event",
]

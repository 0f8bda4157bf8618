from __future__ import annotations

import logging
from typing import Any, Dict

# Attributes every LogRecord already has; passing one through extra= raises.
RESERVED_LOG_KEYS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

SECRET_LOG_KEYS = frozenset({"password", "authorization"})

_log = logging.getLogger("onefuse_client.observability")


def _loggable(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: value
        for key, value in fields.items()
        if key not in RESERVED_LOG_KEYS and key.lower() not in SECRET_LOG_KEYS
    }


def log_event(
    event: str,
    *,
    level: int = logging.INFO,
    logger: logging.Logger | None = None,
    **fields: Any,
) -> None:
    """Log ``event`` as the message, with ``fields`` attached as record attributes."""
    log = logger or _log
    if log.isEnabledFor(level):
        log.log(level, event, extra=_loggable(fields))


__all__ = ["log_event", "RESERVED_LOG_KEYS", "SECRET_LOG_KEYS"]

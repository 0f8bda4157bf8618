import logging
from typing import Any, Iterable, Tuple

PACKAGE_LOGGER = "onefuse_client"

# Record attributes rendered after the event, in this order.
LOG_EXTRA_FIELDS = (
    "resource",
    "method",
    "endpoint",
    "status",
    "duration_ms",
    "error_type",
    "custom_name_id",
    "workspace_id",
)

_HANDLER_FLAG = "_onefuse_logfmt"


def _quote(value: Any) -> str:
    if isinstance(value, (bool, int, float)):
        return str(value)
    text = str(value).replace("\n", "\\n")
    if not text or any(ch in text for ch in ' ="'):
        text = '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return text


class LogfmtFormatter(logging.Formatter):
    """
    Renders one ``key=value`` line per record: level, logger, event, then
    whichever of ``fields`` the record carries. Unset extras are skipped.
    """

    def __init__(self, fields: Iterable[str] = LOG_EXTRA_FIELDS):
        super().__init__()
        self.fields: Tuple[str, ...] = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        pairs = [("level", record.levelname.lower()), ("logger", record.name)]

        message = record.getMessage()
        if message:
            pairs.append(("event", message))

        for key in self.fields:
            value = getattr(record, key, None)
            if value is not None:
                pairs.append((key, value))

        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))

        return " ".join(f"{key}={_quote(value)}" for key, value in pairs)


def setup_logging(level: str = "INFO", logger_name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Attach a logfmt stream handler to the package logger and set its level.

    Only the handler installed here is replaced on repeat calls; the root
    logger and handlers added by the application are left alone.
    """
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    setattr(handler, _HANDLER_FLAG, True)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "PACKAGE_LOGGER"]

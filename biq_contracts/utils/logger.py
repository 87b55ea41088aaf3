import json
import logging
import sys
from datetime import datetime, timezone

from biq_contracts.core import config


_RECORD_ATTRS = frozenset((
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "taskName", "message",
))


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RECORD_ATTRS:
                continue
            payload[key] = value

        return json.dumps(payload, ensure_ascii=False, default=str)


class ContextLogger(logging.LoggerAdapter):
    _reserved = {"exc_info", "stack_info", "stacklevel", "extra"}

    def process(self, msg, kwargs):
        extra = dict(kwargs.get("extra", {}))
        for key, value in kwargs.items():
            if key not in self._reserved:
                extra[key] = value

        clean_kwargs = {key: value for key, value in kwargs.items() if key in self._reserved}
        clean_kwargs["extra"] = extra
        return msg, clean_kwargs


def get_logger(name: str) -> ContextLogger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(config.LOG_LEVEL)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    return ContextLogger(logger, {})

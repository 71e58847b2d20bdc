import io
import logging
import sys
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from messaging.config.settings import Config

CORRELATION_HEADER = "X-Correlation-ID"
NO_CORRELATION_ID = "-"

# Per-request correlation ID, visible to every log record emitted in the request
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)

# Third-party loggers that drown out application logs at INFO
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "prisma", "redis")


def new_correlation_id() -> str:
    return uuid.uuid4().hex


class CorrelationIdFilter(logging.Filter):
    """Stamps the current request's correlation ID onto each record."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that tolerates records emitted before the filter ran."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def _install(logger: logging.Logger, handler: logging.Handler) -> None:
    handler.addFilter(CorrelationIdFilter())
    handler._messaging_handler = True
    logger.addHandler(handler)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    fmt: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the "messaging" logger tree.

    - stdout handler (UTF-8) always, rotating file handler when log_file is set
    - Safe to call more than once: handlers from a previous call are replaced
    """
    app_logger = logging.getLogger("messaging")
    app_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    app_logger.propagate = False

    for handler in list(app_logger.handlers):
        if getattr(handler, "_messaging_handler", False):
            app_logger.removeHandler(handler)
            handler.close()

    formatter = SafeFormatter(fmt or Config.LOG_FORMAT)

    stream_handler = logging.StreamHandler(
        io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", line_buffering=True)
    )
    stream_handler.setFormatter(formatter)
    _install(app_logger, stream_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        _install(app_logger, file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    app_logger.info(f"Logging is set up: level={level}, log_file={log_file or '-'}")
    return app_logger

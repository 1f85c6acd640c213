# util/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from config.settings import settings

# Route warnings.* through the same handlers
logging.captureWarnings(True)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(component)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Layers of this service, keyed by the top-level module a logger lives in.
_COMPONENTS = {
    "config": "config",
    "controller": "http",
    "core": "core",
    "repository": "store",
    "service": "gateway",
    "main": "bootstrap",
}


class ComponentFilter(logging.Filter):
    """
    Stamps every record with a `component` so the shared format never fails.
    An explicit extra={"component": ...} wins; otherwise the logger name's
    first segment picks the layer, and third-party loggers get "lib".
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "component", None):
            head = record.name.split(".", 1)[0]
            if record.name == settings.LOGGER_NAME:
                record.component = "bootstrap"
            else:
                record.component = _COMPONENTS.get(head, "lib")
        return True


class ColoredFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\033[37m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[41m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Keep plain levelname for files; only colorize for console
        if getattr(record, "_colorize", False):
            # Records are shared across handlers; color a copy
            record = logging.makeLogRecord(record.__dict__)
            lvl = record.levelname
            record.levelname = f"{self.COLORS.get(lvl, self.RESET)}{lvl}{self.RESET}"
        return super().format(record)


def _console_handler(level: int) -> logging.Handler:
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    ch.addFilter(ComponentFilter())

    # Tag console records to colorize levelname, leave files plain
    old_emit = ch.emit

    def emit_with_flag(record: logging.LogRecord):
        record._colorize = True  # type: ignore[attr-defined]
        return old_emit(record)

    ch.emit = emit_with_flag  # type: ignore[assignment]
    return ch


def _file_handler(level: int) -> logging.Handler:
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    fh = RotatingFileHandler(
        os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME),
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    fh.addFilter(ComponentFilter())
    return fh


def init_logger() -> logging.Logger:
    """
    Idempotent logger init for the gateway:
    - stdout always; rotating LOG_DIR/LOG_FILE_NAME only when LOG_TO_FILE.
    - Every line carries a [component] tag (store, gateway, http, ...).
    - botocore/aiobotocore chatter is held at WARNING so per-request
      credential and retry logs do not drown the cache hit/miss lines.
    """
    root = logging.getLogger()
    if getattr(root, "_objcache_inited", False):
        return logging.getLogger(settings.LOGGER_NAME)

    level = getattr(logging, (settings.LOG_LEVEL or "INFO").upper(), logging.INFO)
    root.setLevel(level)

    # Clear any default handlers to avoid duplicates
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(_console_handler(level))
    if settings.LOG_TO_FILE:
        root.addHandler(_file_handler(level))

    for noisy in ("botocore", "aiobotocore", "urllib3", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)

    root._objcache_inited = True  # mark as initialized
    logger = logging.getLogger(settings.LOGGER_NAME)
    logger.info(
        "logger.init level=%s file=%s",
        logging.getLevelName(level),
        os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME)
        if settings.LOG_TO_FILE
        else None,
        extra={"component": "bootstrap"},
    )
    return logger

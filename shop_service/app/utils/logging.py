"""
Shop Service Logging Module
===========================

Every component gets its own named logger (``shop_service``,
``shop_service.members``, ...) writing one JSON object per line. Component
loggers own their handlers and do not propagate, so a record logged through
``shop_service.members`` is not written again by the ``shop_service`` handlers.
"""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

SERVICE_NAME = "shop_service"

# Standard LogRecord attributes; anything else on a record came from ``extra=``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def _level(log_level: str) -> int:
    return logging.getLevelName(log_level.upper())


class ShopJSONFormatter(logging.Formatter):
    """Formats a record and its ``extra`` fields as a single JSON line"""

    def __init__(self, exclude_fields: Optional[Iterable[str]] = None):
        super().__init__()
        self.skipped = _RECORD_ATTRS | set(exclude_fields or ())

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "service": SERVICE_NAME,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in self.skipped
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, ensure_ascii=False)


def _rotating_handler(
    path: Path, level: int, max_file_size: int, backup_count: int
) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=max_file_size, backupCount=backup_count)
    handler.setLevel(level)
    return handler


def setup_shop_logging(
    logger_name: str = SERVICE_NAME,
    log_level: str = "INFO",
    enable_file_logging: bool = False,
    log_dir: Optional[str] = None,
    max_file_size: int = 100 * 1024 * 1024,  # 100MB
    backup_count: int = 5,
    exclude_fields: Optional[List[str]] = None,
) -> logging.Logger:
    """
    Configure the logger for one Shop Service component.

    Calling it again for the same name replaces the handlers rather than
    adding to them.

    Returns:
        Configured logger instance
    """
    level = _level(log_level)
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    handlers[0].setLevel(level)

    if enable_file_logging:
        log_dir_path = (
            Path(log_dir) if log_dir else Path(__file__).parent.parent / "logs"
        )
        log_dir_path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _rotating_handler(
                log_dir_path / f"{logger_name}.log", level, max_file_size, backup_count
            )
        )
        handlers.append(
            _rotating_handler(
                log_dir_path / f"{logger_name}_errors.log",
                logging.ERROR,
                max_file_size,
                backup_count,
            )
        )

    formatter = ShopJSONFormatter(exclude_fields=exclude_fields)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(
        "Logging configured",
        extra={"file_logging": enable_file_logging, "handlers": len(handlers)},
    )
    return logger

"""
Logging configuration for the storefront core

Stdlib logging carries every record; structlog is layered on top for the
structured state-change events emitted by the store.
"""

import logging
import logging.handlers
import os
import sys
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import structlog
from pythonjsonlogger import jsonlogger

from storefront.infrastructure.configuration.config import Settings, get_config
from storefront.infrastructure.utilities.constants import FileSettings, LoggingSettings


class StorefrontJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with storefront-specific fields"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        # Thread info for debugging serialized store access
        log_record["thread_id"] = threading.current_thread().ident
        log_record["thread_name"] = threading.current_thread().name
        log_record["process_id"] = os.getpid()

        if hasattr(record, "username"):
            log_record["username"] = record.username

        if hasattr(record, "product_id"):
            log_record["product_id"] = record.product_id


def _configure_structlog() -> None:
    """Route structlog through stdlib logging"""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _configure_specific_loggers() -> None:
    """Quieten chatty third-party loggers"""
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure the root logger.

    - console handler with a plain text format outside production
    - rotating JSON file handler when ``enable_file_logging`` is set
    - structlog bound to stdlib so both APIs share the handlers
    """
    settings = settings or get_config()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper()))
    root_logger.handlers.clear()

    if settings.environment != "production":
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(console_handler)

    if settings.enable_file_logging:
        logs_dir = Path(settings.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            logs_dir / FileSettings.MAIN_LOG_FILE,
            maxBytes=LoggingSettings.MAX_LOG_FILE_SIZE,
            backupCount=LoggingSettings.MAIN_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(StorefrontJsonFormatter())
        root_logger.addHandler(file_handler)

    _configure_structlog()
    _configure_specific_loggers()

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured",
        extra={
            "environment": settings.environment,
            "log_level": settings.log_level,
            "file_logging": settings.enable_file_logging,
        },
    )
    return root_logger


def get_structured_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance, routed through stdlib logging"""
    if not structlog.is_configured():
        _configure_structlog()
    return structlog.get_logger(name)

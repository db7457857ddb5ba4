import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Any, List, Optional

import structlog

if TYPE_CHECKING:
    from scratch_org_factory.config.schemas import LoggingConfig

DEFAULT_LOGGER_NAME = "scratch_org_factory"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds caller information to every record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: LoggingConfig instance. If None, the configuration manager's
               logging section is used.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from scratch_org_factory.config.manager import get_config_manager

        config = get_config_manager().get_logging_config()

    level = getattr(logging, config.level.value)
    destination = config.destination.value

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    handlers: List[logging.Handler] = []

    if destination in ("file", "both"):
        log_path = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(file_handler)

    if destination in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

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
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(config.logger_name or DEFAULT_LOGGER_NAME)
    logger.debug(
        "Logging configured",
        log_level=logging.getLevelName(level),
        log_destination=destination,
    )
    return logger


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to a module name."""
    return structlog.get_logger(name)

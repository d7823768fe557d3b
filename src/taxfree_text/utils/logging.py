"""Structured logging for taxfree-text.

Importing this package never touches logging configuration: loggers come
from ``structlog.get_logger`` and render however the host application set
structlog up. Applications without their own setup can call
``configure_logging()`` once to get JSON output with purchaser personal data
redacted.

Usage:
    >>> from taxfree_text.utils.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> get_logger(__name__).info("normalization_started", record_type="tax_free_sale")
"""

import logging
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, MutableMapping, Optional

import structlog
from structlog.types import EventDict, Processor

from taxfree_text.config import get_settings

# Purchaser data reported to the tax-free system must never reach the logs
SENSITIVE_PATTERNS = [
    re.compile(r".*passport.*", re.IGNORECASE),
    re.compile(r".*purchaser_name.*", re.IGNORECASE),
    re.compile(r".*address.*", re.IGNORECASE),
    re.compile(r".*birth.*", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"

# Handlers added to the root logger by configure_logging()
_installed_handlers: List[logging.Handler] = []
_previous_root_level: Optional[int] = None


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact purchaser personal data from a dictionary before logging.

    Example:
        >>> sanitize_for_logging({"passport_number": "TR1234567", "store": "A01"})
        {'passport_number': '[REDACTED]', 'store': 'A01'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor applying sanitize_for_logging to each event."""
    return sanitize_for_logging(dict(event_dict))


def _log_file_path(log_dir: Path) -> Path:
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"taxfree-text-{datetime.now():%Y%m%d}.log"


def configure_logging(
    level: Optional[str] = None,
    log_to_file: Optional[bool] = None,
    log_file_dir: Optional[str] = None,
) -> None:
    """Install JSON logging on the root logger.

    Arguments left as None fall back to TFT_LOG_LEVEL, TFT_LOG_TO_FILE and
    TFT_LOG_FILE_DIR. Calling it again replaces the handlers it installed
    earlier instead of stacking new ones.

    Args:
        level: Level name such as "INFO" or "DEBUG"
        log_to_file: Also write to a daily rotating file
        log_file_dir: Directory for the log file
    """
    global _previous_root_level

    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if log_to_file is None:
        log_to_file = settings.log_to_file

    _remove_installed_handlers()

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_to_file:
        handlers.append(
            TimedRotatingFileHandler(
                filename=str(_log_file_path(Path(log_file_dir or settings.log_file_dir))),
                when="midnight",
                backupCount=30,
                encoding="utf-8",
            )
        )

    root = logging.getLogger()
    if _previous_root_level is None:
        _previous_root_level = root.level
    root.setLevel(numeric_level)
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
        _installed_handlers.append(handler)

    processors: List[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _remove_installed_handlers() -> None:
    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()


def reset_logging() -> None:
    """Undo configure_logging(): drop its handlers and restore structlog defaults."""
    global _previous_root_level

    _remove_installed_handlers()
    if _previous_root_level is not None:
        logging.getLogger().setLevel(_previous_root_level)
        _previous_root_level = None
    structlog.reset_defaults()


def get_logger(name: str) -> Any:
    """Get a structlog logger; rendering is whatever the host configured."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(record_type="tax_free_sale", store_id="A01")
        >>> logger.info("record_validated")
    """
    return structlog.get_logger().bind(**kwargs)

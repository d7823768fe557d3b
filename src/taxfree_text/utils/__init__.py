"""Shared utilities."""

from taxfree_text.utils.logging import (
    bind_context,
    configure_logging,
    get_logger,
    reset_logging,
    sanitize_for_logging,
)

__all__ = [
    "bind_context",
    "configure_logging",
    "get_logger",
    "reset_logging",
    "sanitize_for_logging",
]

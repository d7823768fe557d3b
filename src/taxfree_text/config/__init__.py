"""Configuration management for taxfree-text.

Usage:
    >>> from taxfree_text.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.convert_kana)
"""

from taxfree_text.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]

"""Codepoint classification against the permitted range table."""

from typing import Any, Optional

from taxfree_text.cleansing.constants import CONTROL_CODEPOINTS, PERMITTED_RANGES


def is_permitted(codepoint: Any) -> bool:
    """
    Return True if the codepoint may be sent to the tax-free system.

    Total over any input: negative values, values beyond U+10FFFF and
    non-integers are simply not permitted.
    """
    if isinstance(codepoint, bool) or not isinstance(codepoint, int):
        return False
    if codepoint in CONTROL_CODEPOINTS:
        return True
    return any(low <= codepoint <= high for low, high, _ in PERMITTED_RANGES)


def is_permitted_char(char: str) -> bool:
    """Classify a single-character string."""
    if not isinstance(char, str) or len(char) != 1:
        return False
    return is_permitted(ord(char))


def find_block(codepoint: Any) -> Optional[str]:
    """Name of the permitted block containing codepoint, if any."""
    if isinstance(codepoint, bool) or not isinstance(codepoint, int):
        return None
    if codepoint in CONTROL_CODEPOINTS:
        return "Basic Latin"
    for low, high, block in PERMITTED_RANGES:
        if low <= codepoint <= high:
            return block
    return None

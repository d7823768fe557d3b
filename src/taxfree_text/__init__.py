"""
taxfree-text - character whitelist normalization for the tax-free sales
management system API.
"""

from taxfree_text.cleansing import (
    CONTROL_CODEPOINTS,
    PERMITTED_RANGES,
    InvalidEncodingError,
    NtaUnicodeNormalizer,
    RejectionCollector,
    is_permitted,
    is_permitted_char,
    log_rejection,
    normalize_nta_text,
    replace_with,
    widen_katakana,
)

__version__ = "0.1.0"

__all__ = [
    "CONTROL_CODEPOINTS",
    "PERMITTED_RANGES",
    "InvalidEncodingError",
    "NtaUnicodeNormalizer",
    "RejectionCollector",
    "is_permitted",
    "is_permitted_char",
    "log_rejection",
    "normalize_nta_text",
    "replace_with",
    "widen_katakana",
]

"""
Character whitelist cleansing for the tax-free sales management system.

Usage:
    # 1. Normalize a value directly
    from taxfree_text.cleansing import NtaUnicodeNormalizer

    normalizer = NtaUnicodeNormalizer()
    normalizer.normalize("ﾀﾅｶ\\u0001")  # 'タナカ'

    # 2. Handle rejected characters
    from taxfree_text.cleansing import RejectionCollector

    collector = RejectionCollector(replacement="?")
    normalizer.callback = collector

    # 3. Normalize pydantic model fields
    from taxfree_text.cleansing import NtaText

    class TaxFreeItem(BaseModel):
        item_name: NtaText
"""

from taxfree_text.cleansing.callbacks import (
    RejectedCharacter,
    RejectionCollector,
    format_codepoint,
    log_rejection,
    replace_with,
)
from taxfree_text.cleansing.classifier import find_block, is_permitted, is_permitted_char
from taxfree_text.cleansing.constants import CONTROL_CODEPOINTS, PERMITTED_RANGES
from taxfree_text.cleansing.integrations.pydantic_adapter import NtaText, nta_text_fields
from taxfree_text.cleansing.normalizer import (
    InvalidEncodingError,
    NtaUnicodeNormalizer,
    RejectionCallback,
    normalize_nta_text,
)
from taxfree_text.cleansing.width import widen_katakana

__all__: list[str] = [
    # Normalization
    "NtaUnicodeNormalizer",
    "normalize_nta_text",
    "widen_katakana",
    "is_permitted",
    "is_permitted_char",
    "find_block",
    "InvalidEncodingError",
    "RejectionCallback",
    "PERMITTED_RANGES",
    "CONTROL_CODEPOINTS",
    # Callbacks
    "replace_with",
    "log_rejection",
    "format_codepoint",
    "RejectionCollector",
    "RejectedCharacter",
    # Pydantic
    "NtaText",
    "nta_text_fields",
]

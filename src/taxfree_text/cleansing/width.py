"""Half-width katakana widening.

Half-width katakana (U+FF61 to U+FF9F) is outside the permitted character set,
so it is widened to full-width katakana before filtering. A base kana followed
by a half-width voiced or semi-voiced sound mark becomes a single voiced kana
(ｶﾞ -> ガ, ﾊﾟ -> パ).
"""

import unicodedata

import jaconv

from taxfree_text.cleansing.constants import (
    HALFWIDTH_KATAKANA_END,
    HALFWIDTH_KATAKANA_START,
    HALFWIDTH_VOICED_MARKS,
)


def _is_halfwidth_katakana(char: str) -> bool:
    return HALFWIDTH_KATAKANA_START <= ord(char) <= HALFWIDTH_KATAKANA_END


def _widen_residual(char: str) -> str:
    # NFKC would turn a stray ﾞ into a combining mark, so marks map explicitly
    mark = HALFWIDTH_VOICED_MARKS.get(ord(char))
    if mark is not None:
        return mark
    return unicodedata.normalize("NFKC", char)


def widen_katakana(value: str) -> str:
    """
    Convert half-width katakana in value to full-width katakana.

    Everything outside the half-width katakana block is returned unchanged,
    and the result never contains half-width katakana, so the conversion is
    idempotent.

    Args:
        value: Text to convert

    Returns:
        Text with half-width katakana widened
    """
    if not value:
        return value

    widened = jaconv.h2z(value, kana=True, ascii=False, digit=False)
    if not any(_is_halfwidth_katakana(char) for char in widened):
        return widened

    return "".join(
        _widen_residual(char) if _is_halfwidth_katakana(char) else char
        for char in widened
    )

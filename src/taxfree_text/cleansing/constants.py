"""Unicode whitelist constants for the tax-free sales management system.

The tax-free sales management system API accepts JIS X 0221 text encoded as
UTF-8, limited to the blocks below. Basic Latin excludes every control
character except tab, line feed and carriage return; Latin-1 Supplement
excludes the C1 controls (0080-009F); Halfwidth and Fullwidth Forms excludes
halfwidth katakana (FF66-FF9F).
"""

from typing import FrozenSet, Tuple

# Control characters allowed despite the Basic Latin exclusion
CONTROL_CODEPOINTS: FrozenSet[int] = frozenset({0x0009, 0x000A, 0x000D})

# Inclusive (low, high, block) intervals, kept in codepoint order
PERMITTED_RANGES: Tuple[Tuple[int, int, str], ...] = (
    (0x0020, 0x007E, "Basic Latin"),
    (0x00A0, 0x00FF, "Latin-1 Supplement"),
    (0x0370, 0x03FF, "Basic Greek"),
    (0x0400, 0x04FF, "Cyrillic"),
    (0x2000, 0x206F, "General Punctuation"),
    (0x2150, 0x218F, "Number Forms"),
    (0x2190, 0x21FF, "Arrows"),
    (0x2200, 0x22FF, "Mathematical Operators"),
    (0x2460, 0x24FF, "Enclosed Alphanumerics"),
    (0x2500, 0x257F, "Box Drawing"),
    (0x25A0, 0x25FF, "Geometric Shapes"),
    (0x3000, 0x303F, "CJK Symbols and Punctuation"),
    (0x3040, 0x309F, "Hiragana"),
    (0x30A0, 0x30FF, "Katakana"),
    (0x3200, 0x32FF, "Enclosed CJK Letters and Months"),
    (0x3300, 0x33FF, "CJK Compatibility"),
    (0x4E00, 0x9FFF, "CJK Unified Ideographs"),
    (0xF900, 0xFAFF, "CJK Compatibility Ideographs"),
    (0xFF00, 0xFF65, "Halfwidth and Fullwidth Forms"),
    (0xFFA0, 0xFFEF, "Halfwidth and Fullwidth Forms"),
)

# Halfwidth katakana block (U+FF61 to U+FF9F), rejected unless widened first
HALFWIDTH_KATAKANA_START = 0xFF61
HALFWIDTH_KATAKANA_END = 0xFF9F

# Stray halfwidth voiced sound marks map to the spacing fullwidth marks
HALFWIDTH_VOICED_MARKS = {
    0xFF9E: "゛",  # ﾞ -> ゛
    0xFF9F: "゜",  # ﾟ -> ゜
}

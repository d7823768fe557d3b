"""Ready-made rejection callbacks for NtaUnicodeNormalizer."""

from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from taxfree_text.utils.logging import get_logger

logger = get_logger(__name__)


def format_codepoint(codepoint: int) -> str:
    """Format a codepoint as U+XXXX."""
    return f"U+{codepoint:04X}"


def replace_with(placeholder: str) -> Callable[[str, int], str]:
    """
    Build a callback that substitutes every rejected character.

    Example:
        >>> normalizer = NtaUnicodeNormalizer(callback=replace_with("?"))
        >>> normalizer.normalize("A\\ue000B")
        'A?B'
    """

    def _replace(char: str, codepoint: int) -> str:
        return placeholder

    return _replace


def log_rejection(char: str, codepoint: int) -> str:
    """Log the rejected character and drop it."""
    logger.warning(
        "nta_normalizer.character_rejected",
        codepoint=format_codepoint(codepoint),
    )
    return ""


@dataclass(frozen=True)
class RejectedCharacter:
    """A character removed by the normalizer."""

    char: str
    codepoint: int
    index: int
    """Position among the rejections (0-based), not in the input"""

    @property
    def label(self) -> str:
        return format_codepoint(self.codepoint)


class RejectionCollector:
    """
    Callback object recording every rejected character.

    Useful for reporting which characters a record lost before it is sent to
    the tax-free system.

    Example:
        >>> collector = RejectionCollector()
        >>> NtaUnicodeNormalizer(callback=collector).normalize("A\\u0001B")
        'AB'
        >>> collector.summary()
        {'U+0001': 1}
    """

    def __init__(self, replacement: str = "") -> None:
        self.replacement = replacement
        self.rejections: List[RejectedCharacter] = []

    def __call__(self, char: str, codepoint: int) -> str:
        self.rejections.append(
            RejectedCharacter(char=char, codepoint=codepoint, index=len(self.rejections))
        )
        return self.replacement

    def __len__(self) -> int:
        return len(self.rejections)

    @property
    def codepoints(self) -> List[int]:
        return [rejection.codepoint for rejection in self.rejections]

    def summary(self) -> Dict[str, int]:
        """Count rejections per codepoint, in first-seen order."""
        return dict(Counter(rejection.label for rejection in self.rejections))

    def clear(self) -> None:
        self.rejections.clear()

    def first(self) -> Optional[RejectedCharacter]:
        return self.rejections[0] if self.rejections else None

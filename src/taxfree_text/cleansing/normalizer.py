"""
Character whitelist normalizer for the tax-free sales management system.

The tax-free sales management system API (API specification pp. 9-10) accepts
only a fixed subset of JIS X 0221 / Unicode. NtaUnicodeNormalizer removes every
character outside that subset, optionally widening half-width katakana first
and optionally handing each rejected character to a callback that decides
what to put in its place.

Usage:
    >>> normalizer = NtaUnicodeNormalizer()
    >>> normalizer.normalize("Hello, 世界! ｱｲｳ")
    'Hello, 世界! アイウ'

    >>> normalizer.callback = lambda char, codepoint: "?"
    >>> normalizer.normalize("A\\u0001B")
    'A?B'
"""

from typing import Callable, List, Optional, Union

from taxfree_text.cleansing.classifier import is_permitted
from taxfree_text.cleansing.width import widen_katakana
from taxfree_text.config import get_settings

RejectionCallback = Callable[[str, int], Optional[str]]


class InvalidEncodingError(ValueError):
    """Raised when input cannot be decoded into Unicode scalar values."""

    def __init__(self, message: str, encoding: str, position: Optional[int] = None):
        super().__init__(message)
        self.encoding = encoding
        self.position = position


class NtaUnicodeNormalizer:
    """
    Filters text down to the characters permitted by the tax-free system.

    Attributes:
        convert_kana: Widen half-width katakana before filtering.
        callback: Called as callback(char, codepoint) for every rejected
            character; the returned string (possibly empty) replaces it.
        encoding: Encoding used when normalize() receives bytes.
    """

    def __init__(
        self,
        convert_kana: Optional[bool] = None,
        callback: Optional[RejectionCallback] = None,
        encoding: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.convert_kana = settings.convert_kana if convert_kana is None else convert_kana
        self.callback = callback
        self.encoding = encoding or settings.input_encoding

    def normalize(self, value: Union[str, bytes]) -> str:
        """
        Remove (or replace) every character the tax-free system does not accept.

        Args:
            value: Text, or bytes in the configured encoding

        Returns:
            Normalized text

        Raises:
            InvalidEncodingError: If value is not valid text
            TypeError: If value is neither str nor bytes
        """
        text = self._decode(value)

        if self.convert_kana:
            text = widen_katakana(text)

        result: List[str] = []
        for char in text:
            codepoint = ord(char)
            if is_permitted(codepoint):
                result.append(char)
                continue

            if self.callback is not None:
                result.append(self.callback(char, codepoint) or "")

        return "".join(result)

    def __call__(self, value: Union[str, bytes]) -> str:
        return self.normalize(value)

    def _decode(self, value: Union[str, bytes]) -> str:
        if isinstance(value, (bytes, bytearray)):
            try:
                return bytes(value).decode(self.encoding)
            except UnicodeDecodeError as exc:
                raise InvalidEncodingError(
                    f"Input is not valid {self.encoding}: {exc.reason} at byte {exc.start}",
                    encoding=self.encoding,
                    position=exc.start,
                ) from exc

        if not isinstance(value, str):
            raise TypeError(
                f"Expected str or bytes, got {type(value).__name__}"
            )

        # Lone surrogates are not Unicode scalar values
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidEncodingError(
                f"Input contains a lone surrogate at index {exc.start}",
                encoding="utf-8",
                position=exc.start,
            ) from exc
        return value


def normalize_nta_text(
    value: Union[str, bytes],
    convert_kana: bool = True,
    callback: Optional[RejectionCallback] = None,
    encoding: Optional[str] = None,
) -> str:
    """
    Functional form of NtaUnicodeNormalizer.normalize.

    Example:
        >>> normalize_nta_text("\\t\\n\\rABC")
        '\\t\\n\\rABC'
    """
    normalizer = NtaUnicodeNormalizer(
        convert_kana=convert_kana, callback=callback, encoding=encoding
    )
    return normalizer.normalize(value)

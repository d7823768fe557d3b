"""
Pydantic integration for whitelist normalization.

Two ways to normalize model fields before validation:

    class TaxFreeSale(BaseModel):
        item_name: NtaText

    class Purchaser(BaseModel):
        name: str
        nationality: str

        normalize_text = nta_text_fields("name", "nationality")
"""

from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, ValidationInfo, field_validator

from taxfree_text.cleansing.normalizer import NtaUnicodeNormalizer, RejectionCallback


def _normalize_if_text(value: Any, normalizer: NtaUnicodeNormalizer) -> Any:
    if isinstance(value, (str, bytes, bytearray)):
        return normalizer.normalize(value)
    return value


def nta_text_fields(
    *field_names: str,
    convert_kana: bool = True,
    callback: Optional[RejectionCallback] = None,
) -> Any:
    """
    Build a "before" field validator normalizing the named fields.

    Assign the result to a public attribute in the model body. Non-text values
    are passed through for pydantic to validate.

    Args:
        field_names: Fields to normalize
        convert_kana: Widen half-width katakana first
        callback: Optional rejection callback
    """
    normalizer = NtaUnicodeNormalizer(convert_kana=convert_kana, callback=callback)

    @field_validator(*field_names, mode="before")
    @classmethod
    def wrapper(cls: Any, v: Any, info: ValidationInfo) -> Any:
        return _normalize_if_text(v, normalizer)

    return wrapper


def _normalize_default(value: Any) -> Any:
    return _normalize_if_text(value, NtaUnicodeNormalizer(convert_kana=True))


NtaText = Annotated[str, BeforeValidator(_normalize_default)]

"""
Environment-based defaults for taxfree-text.

Every field is read with the TFT_ prefix (TFT_CONVERT_KANA=false disables
katakana widening by default). A ``.env`` file in the current working
directory is honoured; point TFT_ENV_FILE at another file to use that instead.
"""

import codecs
import os
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "TFT_ENV_FILE"
DEFAULT_ENV_FILE = ".env"


class Settings(BaseSettings):
    """
    Library defaults.

    Values passed explicitly to NtaUnicodeNormalizer or configure_logging
    always win over these.
    """

    convert_kana: bool = Field(
        default=True,
        description="Widen half-width katakana before filtering",
    )
    input_encoding: str = Field(
        default="utf-8",
        description="Encoding used to decode bytes input",
    )

    # Only consulted by configure_logging()
    log_level: str = Field(default="INFO", description="Logging level name")
    log_to_file: bool = Field(default=False, description="Also write a daily log file")
    log_file_dir: str = Field(default="logs", description="Directory for log files")

    @field_validator("input_encoding")
    @classmethod
    def validate_input_encoding(cls, value: str) -> str:
        """Reject encodings Python does not know about."""
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"Unknown input encoding: {value}") from exc

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    model_config = SettingsConfigDict(
        env_prefix="TFT_",
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    The env file is resolved when settings are first loaded, relative to the
    current working directory.
    """
    return Settings(_env_file=os.getenv(ENV_FILE_VARIABLE, DEFAULT_ENV_FILE))

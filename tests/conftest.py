"""Pytest configuration shared by all test suites."""

from __future__ import annotations

from typing import Generator

import pytest

from taxfree_text.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from TFT_* variables of the developer environment."""
    for name in (
        "TFT_CONVERT_KANA",
        "TFT_INPUT_ENCODING",
        "TFT_LOG_LEVEL",
        "TFT_LOG_TO_FILE",
        "TFT_LOG_FILE_DIR",
        "TFT_ENV_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

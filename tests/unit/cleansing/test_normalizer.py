"""Unit tests for NtaUnicodeNormalizer."""

import pytest
from structlog.testing import capture_logs

from taxfree_text.cleansing import (
    InvalidEncodingError,
    NtaUnicodeNormalizer,
    normalize_nta_text,
    replace_with,
)


@pytest.mark.unit
class TestNormalize:
    def test_widens_halfwidth_katakana_and_keeps_permitted_text(self):
        assert NtaUnicodeNormalizer().normalize("Hello, 世界! ｱｲｳ") == "Hello, 世界! アイウ"

    def test_control_and_private_use_removed(self):
        assert NtaUnicodeNormalizer().normalize("A\u0001B\ue000C") == "ABC"

    def test_tab_line_feed_carriage_return_kept(self):
        assert NtaUnicodeNormalizer().normalize("\t\n\rABC") == "\t\n\rABC"

    def test_empty_input(self):
        assert NtaUnicodeNormalizer().normalize("") == ""

    def test_without_kana_conversion_halfwidth_katakana_is_dropped(self):
        normalizer = NtaUnicodeNormalizer(convert_kana=False)
        assert normalizer.normalize("ｱA") == "A"

    def test_halfwidth_punctuation_outside_katakana_range_kept_without_conversion(self):
        normalizer = NtaUnicodeNormalizer(convert_kana=False)
        assert normalizer.normalize("｡｢｣､･") == "｡｢｣､･"

    def test_output_preserves_input_order(self):
        text = "z\u0001y\U0001F600x\u0085w"
        assert NtaUnicodeNormalizer().normalize(text) == "zyxw"

    def test_combining_marks_filtered_independently(self):
        # U+0301 is outside the whitelist, its base letter is not
        assert NtaUnicodeNormalizer().normalize("e\u0301") == "e"
        # U+3099 sits in the Hiragana block and survives on its own
        assert NtaUnicodeNormalizer().normalize("\U00020000\u3099") == "\u3099"

    def test_supplementary_plane_character_is_one_unit(self):
        calls = []
        normalizer = NtaUnicodeNormalizer(
            callback=lambda char, codepoint: calls.append((char, codepoint)) or ""
        )
        assert normalizer.normalize("A\U00020BB7B") == "AB"
        assert calls == [("\U00020BB7", 0x20BB7)]

    def test_callable_instance(self):
        assert NtaUnicodeNormalizer()("ｱ") == "ア"


@pytest.mark.unit
class TestRejectionCallback:
    def test_no_callback_drops_silently(self):
        assert NtaUnicodeNormalizer().normalize("\u0000\u0007\u007f") == ""

    def test_question_mark_substitution_keeps_positions(self):
        normalizer = NtaUnicodeNormalizer(callback=replace_with("?"))
        assert normalizer.normalize("A\u0001B\ue000C") == "A?B?C"

    def test_callback_receives_char_and_codepoint_in_order(self):
        calls = []

        def record(char, codepoint):
            calls.append((char, codepoint))
            return ""

        NtaUnicodeNormalizer(callback=record).normalize("\u0001x\ue000\u0002")
        assert calls == [("\u0001", 0x0001), ("\ue000", 0xE000), ("\u0002", 0x0002)]

    def test_callback_not_called_for_widened_katakana(self):
        calls = []
        normalizer = NtaUnicodeNormalizer(
            callback=lambda char, codepoint: calls.append(codepoint) or ""
        )
        assert normalizer.normalize("ｶﾞ") == "ガ"
        assert calls == []

    def test_callback_may_return_multiple_characters_or_none(self):
        normalizer = NtaUnicodeNormalizer(callback=lambda char, cp: f"[{cp:04X}]")
        assert normalizer.normalize("a\u0001") == "a[0001]"

        normalizer.callback = lambda char, cp: None
        assert normalizer.normalize("a\u0001") == "a"

    def test_callback_failure_propagates_unchanged(self):
        class Boom(Exception):
            pass

        def explode(char, codepoint):
            raise Boom(codepoint)

        with pytest.raises(Boom):
            NtaUnicodeNormalizer(callback=explode).normalize("ok\u0001")

    def test_configuration_can_change_between_calls(self):
        normalizer = NtaUnicodeNormalizer()
        assert normalizer.normalize("ｱ\u0001") == "ア"

        normalizer.convert_kana = False
        normalizer.callback = replace_with("_")
        assert normalizer.normalize("ｱ\u0001") == "__"

    def test_rejections_are_not_logged(self):
        with capture_logs() as logs:
            NtaUnicodeNormalizer().normalize("a\u0001\ue000b")
            NtaUnicodeNormalizer(callback=replace_with("?")).normalize("\u0001")
        assert logs == []


@pytest.mark.unit
class TestEncoding:
    def test_utf8_bytes_are_decoded(self):
        assert NtaUnicodeNormalizer().normalize("世界ｱ".encode("utf-8")) == "世界ア"

    def test_configured_encoding(self):
        normalizer = NtaUnicodeNormalizer(encoding="shift_jis")
        assert normalizer.normalize("日本".encode("shift_jis")) == "日本"

    def test_invalid_bytes_raise(self):
        with pytest.raises(InvalidEncodingError) as exc_info:
            NtaUnicodeNormalizer().normalize(b"abc\xff\xfe")

        assert exc_info.value.encoding == "utf-8"
        assert exc_info.value.position == 3
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_lone_surrogate_raises(self):
        with pytest.raises(InvalidEncodingError) as exc_info:
            NtaUnicodeNormalizer().normalize("ab\ud800")
        assert exc_info.value.position == 2

    def test_invalid_encoding_is_a_value_error(self):
        with pytest.raises(ValueError):
            NtaUnicodeNormalizer().normalize(b"\xc3")

    @pytest.mark.parametrize("value", [None, 123, ["a"]])
    def test_non_text_input_rejected(self, value):
        with pytest.raises(TypeError):
            NtaUnicodeNormalizer().normalize(value)


@pytest.mark.unit
class TestSettingsDefaults:
    def test_convert_kana_default_from_environment(self, monkeypatch):
        monkeypatch.setenv("TFT_CONVERT_KANA", "false")
        assert NtaUnicodeNormalizer().convert_kana is False
        assert NtaUnicodeNormalizer(convert_kana=True).convert_kana is True

    def test_input_encoding_default_from_environment(self, monkeypatch):
        monkeypatch.setenv("TFT_INPUT_ENCODING", "cp932")
        normalizer = NtaUnicodeNormalizer()
        assert normalizer.normalize("テスト".encode("cp932")) == "テスト"


@pytest.mark.unit
class TestNormalizeNtaText:
    def test_defaults(self):
        assert normalize_nta_text("ﾃｽﾄ\u0001") == "テスト"

    def test_arguments(self):
        assert normalize_nta_text("ﾃ\u0001", convert_kana=False, callback=replace_with("*")) == "**"

"""
Name: Tokenizer Unit Tests

Responsibilities:
  - Verificar sanitize / keyword_tokens / count_words
  - Validar redondeo half-up y estimación de tokens
  - Validar conteo y corte en unidades UTF-16
"""

import pytest

from rag_sandbox.infrastructure.text.tokenizer import (
    STOP_WORDS,
    count_words,
    estimate_token_count,
    keyword_tokens,
    round_half_up,
    sanitize,
    truncate_utf16,
    utf16_code_units,
    utf16_length,
)

pytestmark = pytest.mark.unit


class TestSanitize:

    def test_lowercases_and_strips_punctuation(self):
        assert sanitize("Rotate API-keys, now!") == ["rotate", "api", "keys", "now"]

    def test_empty_and_none(self):
        assert sanitize("") == []
        assert sanitize(None) == []


class TestKeywordTokens:

    def test_drops_stop_words_keeps_repeats(self):
        assert keyword_tokens("The SSO and the sso token") == ["sso", "sso", "token"]

    def test_stop_word_list_is_lowercase(self):
        assert all(word == word.lower() for word in STOP_WORDS)


class TestCounts:

    def test_count_words_uses_raw_whitespace(self):
        assert count_words("  SSO-setup,  done \n now ") == 3
        assert count_words("") == 0

    @pytest.mark.parametrize(
        "value,expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (0.0, 0)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_estimate_token_count(self):
        # 5 palabras * 1.3 = 6.5 -> 7
        assert estimate_token_count("one two three four five") == 7

    def test_estimate_token_count_minimum_one(self):
        assert estimate_token_count("") == 1


class TestUtf16:

    def test_code_units(self):
        assert utf16_code_units("a😀") == [0x61, 0xD83D, 0xDE00]

    @pytest.mark.parametrize(
        "text,expected", [("", 0), ("abc", 3), ("é", 1), ("😀", 2), ("a😀b", 4)]
    )
    def test_length(self, text, expected):
        assert utf16_length(text) == expected

    def test_truncate_ascii(self):
        assert truncate_utf16("abcdef", 4) == "abcd"
        assert truncate_utf16("abc", 10) == "abc"

    def test_truncate_never_splits_surrogate_pair(self):
        assert truncate_utf16("😀😀", 3) == "😀"
        assert truncate_utf16("😀", 1) == ""

    def test_truncate_non_positive(self):
        assert truncate_utf16("abc", 0) == ""
        assert truncate_utf16("abc", -1) == ""

"""Unit tests for text input checks."""

import pytest

from unistyler.core import sanitize_text, validate_text_input
from unistyler.exceptions import TextInputError


class TestValidateTextInput:
    """Tests for validate_text_input."""

    def test_accepts_text(self) -> None:
        assert validate_text_input("Hello") == "Hello"

    def test_accepts_empty(self) -> None:
        assert validate_text_input("") == ""

    def test_accepts_exact_limit(self) -> None:
        assert validate_text_input("a" * 200) == "a" * 200

    def test_rejects_long_text(self) -> None:
        with pytest.raises(TextInputError, match="Text exceeds maximum length of 200 characters"):
            validate_text_input("a" * 201)

    def test_custom_limit(self) -> None:
        with pytest.raises(TextInputError, match="maximum length of 3"):
            validate_text_input("abcd", max_length=3)

    def test_counts_code_points(self) -> None:
        assert validate_text_input("😀" * 3, max_length=3) == "😀😀😀"

    @pytest.mark.parametrize("value", [None, 42, b"bytes", ["a"]])
    def test_rejects_non_string(self, value) -> None:
        with pytest.raises(TextInputError, match="Input must be a string"):
            validate_text_input(value)


class TestSanitizeText:
    """Tests for sanitize_text."""

    def test_strips_whitespace(self) -> None:
        assert sanitize_text("  Hello \n") == "Hello"

    def test_keeps_unicode(self) -> None:
        assert sanitize_text(" 𝐇𝐢 ✨ ") == "𝐇𝐢 ✨"

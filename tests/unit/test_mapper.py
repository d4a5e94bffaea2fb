"""Unit tests for the character mapper."""

import pytest

from unistyler.core import BASELINE_CHARACTERS, CharacterMapper
from unistyler.domain import Style


@pytest.fixture
def bold_style(mapping_factory) -> Style:
    """Style mapping lowercase, uppercase and digits to bold."""
    mapping = mapping_factory()
    for offset, char in enumerate("abcdefghijklmnopqrstuvwxyz"):
        mapping[char] = chr(0x1D41A + offset)
    for offset, char in enumerate("ABCDEFGHIJKLMNOPQRSTUVWXYZ"):
        mapping[char] = chr(0x1D400 + offset)
    for offset, char in enumerate("0123456789"):
        mapping[char] = chr(0x1D7CE + offset)
    return Style(id="bold", name="Bold", preview="𝐁𝐨𝐥𝐝", mapping=mapping)


@pytest.fixture
def mapper(bold_style: Style) -> CharacterMapper:
    mapper = CharacterMapper()
    mapper.load_mapping(bold_style)
    return mapper


class TestLoadMapping:
    """Tests for CharacterMapper.load_mapping."""

    def test_load_mapping(self, mapper: CharacterMapper) -> None:
        assert mapper.mapping["a"] == "𝐚"

    def test_last_loaded_wins(self, mapper: CharacterMapper) -> None:
        mapper.load_mapping(Style(id="x", name="X", preview="", mapping={"b": "β"}))
        assert mapper.transform("ab") == "aβ"

    def test_mapping_is_copied(self) -> None:
        style = Style(id="x", name="X", preview="", mapping={"a": "α"})
        mapper = CharacterMapper()
        mapper.load_mapping(style)
        style.mapping["a"] = "A"
        assert mapper.transform("a") == "α"


class TestTransform:
    """Tests for CharacterMapper.transform."""

    def test_lowercase(self, mapper: CharacterMapper) -> None:
        assert mapper.transform("abc") == "𝐚𝐛𝐜"

    def test_uppercase(self, mapper: CharacterMapper) -> None:
        assert mapper.transform("ABC") == "𝐀𝐁𝐂"

    def test_digits(self, mapper: CharacterMapper) -> None:
        assert mapper.transform("123") == "𝟏𝟐𝟑"

    def test_spaces_preserved(self, mapper: CharacterMapper) -> None:
        assert mapper.transform("a b") == "𝐚 𝐛"

    def test_unmapped_falls_back(self) -> None:
        mapper = CharacterMapper()
        mapper.load_mapping(Style(id="x", name="X", preview="", mapping={"a": "𝐚"}))
        assert mapper.transform("xyz") == "xyz"

    def test_mixed_mapped_and_unmapped(self, mapper: CharacterMapper) -> None:
        assert mapper.transform("a@b#c") == "𝐚@𝐛#𝐜"

    def test_empty_string(self, mapper: CharacterMapper) -> None:
        assert mapper.transform("") == ""

    def test_emoji_passes_through_whole(self, mapper: CharacterMapper) -> None:
        assert mapper.transform("a😀b") == "𝐚😀𝐛"

    def test_combining_mark_kept_per_code_point(self, mapper: CharacterMapper) -> None:
        assert mapper.transform("e\u0301") == "𝐞\u0301"

    def test_multi_code_point_replacement(self) -> None:
        mapper = CharacterMapper()
        mapper.load_mapping(Style(id="x", name="X", preview="", mapping={"a": "a\u0336"}))
        assert mapper.transform("aa") == "a\u0336a\u0336"

    def test_empty_replacement_falls_back(self) -> None:
        mapper = CharacterMapper()
        mapper.load_mapping(Style(id="x", name="X", preview="", mapping={"a": ""}))
        assert mapper.transform("a") == "a"

    def test_long_text(self, mapper: CharacterMapper) -> None:
        assert mapper.transform("a" * 1000) == "𝐚" * 1000

    def test_repeatable(self, mapper: CharacterMapper) -> None:
        assert mapper.transform("Hello 42!") == mapper.transform("Hello 42!")


class TestValidateMapping:
    """Tests for CharacterMapper.validate_mapping."""

    def test_complete_mapping(self, mapper: CharacterMapper) -> None:
        assert mapper.validate_mapping() is True

    def test_incomplete_mapping(self) -> None:
        mapper = CharacterMapper()
        mapper.load_mapping(Style(id="x", name="X", preview="", mapping={"a": "a", "b": "b"}))
        assert mapper.validate_mapping() is False

    @pytest.mark.parametrize("char", [" ", "?", "Z", "0"])
    def test_single_missing_character(self, mapping_factory, char: str) -> None:
        mapping = mapping_factory()
        del mapping[char]
        mapper = CharacterMapper()
        mapper.load_mapping(Style(id="x", name="X", preview="", mapping=mapping))
        assert mapper.validate_mapping() is False

    def test_baseline_has_67_characters(self) -> None:
        assert len(BASELINE_CHARACTERS) == 67
        assert len(set(BASELINE_CHARACTERS)) == 67


class TestClear:
    """Tests for CharacterMapper.clear."""

    def test_clear(self, mapper: CharacterMapper) -> None:
        mapper.clear()
        assert mapper.mapping == {}
        assert mapper.transform("abc") == "abc"
        assert mapper.validate_mapping() is False

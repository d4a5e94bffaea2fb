"""Tests for domain models to verify they work correctly."""

import pytest

from unistyler.domain import (
    Decorator,
    FontPack,
    PackCategory,
    Style,
    StyledResult,
    ValidationIssue,
    ValidationResult,
)


class TestStyle:
    """Tests for Style class."""

    def test_style_from_dict(self) -> None:
        style = Style.from_dict({"id": "bold", "name": "Bold", "preview": "B", "mapping": {"a": "𝐚"}})
        assert style.id == "bold"
        assert style.mapping == {"a": "𝐚"}

    def test_style_mapping_is_copied(self) -> None:
        source = {"a": "𝐚"}
        style = Style.from_dict({"id": "bold", "mapping": source})
        source["b"] = "𝐛"
        assert "b" not in style.mapping

    def test_style_missing_mapping_is_empty(self) -> None:
        style = Style.from_dict({"id": "bold", "mapping": None})
        assert style.mapping == {}


class TestDecorator:
    """Tests for Decorator class."""

    def test_decorator_color_optional(self) -> None:
        decorator = Decorator.from_dict({"id": "stars", "name": "Stars", "pattern": "✨{text}✨"})
        assert decorator.color is None
        assert "color" not in decorator.to_dict()

    def test_decorator_color_kept(self) -> None:
        decorator = Decorator(id="h", name="Hearts", pattern="💖{text}💖", color="#ff69b4")
        assert decorator.to_dict()["color"] == "#ff69b4"


class TestFontPack:
    """Tests for FontPack class."""

    def test_from_dict(self, valid_pack) -> None:
        pack = FontPack.from_dict(valid_pack)
        assert pack.id == "test"
        assert pack.category == "core"
        assert [s.id for s in pack.styles] == ["bold", "italic"]
        assert [d.id for d in pack.decorators] == ["stars", "hearts"]

    def test_to_dict_uses_wire_keys(self, valid_pack) -> None:
        pack = FontPack.from_dict({**valid_pack, "previewImage": "https://example.com/p.png"})
        data = pack.to_dict()
        assert data["previewImage"] == "https://example.com/p.png"
        assert "preview_image" not in data

    def test_to_dict_matches_source(self, valid_pack) -> None:
        assert FontPack.from_dict(valid_pack).to_dict() == valid_pack

    def test_category_enum_normalized(self) -> None:
        pack = FontPack(id="p", name="P", category=PackCategory.SEASONAL, version="1")
        assert pack.category == "seasonal"
        assert pack.to_dict()["category"] == "seasonal"

    @pytest.mark.parametrize(
        ("price", "free", "premium"),
        [
            (0, True, False),
            (0.0, True, False),
            (1.99, False, True),
            ("4.99", False, False),
            (float("nan"), False, False),
        ],
    )
    def test_free_and_premium(self, price, free, premium) -> None:
        pack = FontPack(id="p", name="P", category="core", version="1", price=price)
        assert pack.is_free is free
        assert pack.is_premium is premium

    def test_get_style_and_decorator(self, valid_pack) -> None:
        pack = FontPack.from_dict(valid_pack)
        assert pack.get_style("italic").name == "Italic"
        assert pack.get_style("nope") is None
        assert pack.get_decorator("hearts").pattern == "💖{text}💖"
        assert pack.get_decorator("nope") is None


class TestResults:
    """Tests for result types."""

    def test_styled_result_to_dict(self) -> None:
        result = StyledResult(original="Hi", styled="𝐇𝐢", style_id="test_bold", pack_id="test")
        assert result.to_dict() == {
            "original": "Hi",
            "styled": "𝐇𝐢",
            "styleId": "test_bold",
            "packId": "test",
        }

    def test_styled_result_immutable(self) -> None:
        result = StyledResult(original="Hi", styled="Hi", style_id="t_b", pack_id="t")
        with pytest.raises(AttributeError):
            result.styled = "x"  # type: ignore

    def test_validation_result_empty_is_valid(self) -> None:
        result = ValidationResult()
        assert result.valid
        assert result.errors == []

    def test_validation_result_collects_messages(self) -> None:
        result = ValidationResult()
        result.add("id", "Pack missing id")
        result.add("name", "Pack missing name")
        assert not result.valid
        assert result.errors == ["Pack missing id", "Pack missing name"]
        assert result.issues[0] == ValidationIssue("id", "Pack missing id")

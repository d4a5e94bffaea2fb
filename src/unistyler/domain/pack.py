"""Font pack, style and decorator representation.

This module defines the domain models for font packs. A pack bundles
styles (character substitution tables) and decorators (text templates)
together with pricing and category metadata.
"""

from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Any

TEXT_PLACEHOLDER = "{text}"


class PackCategory(str, Enum):
    """Category a font pack is listed under."""

    CORE = "core"
    AESTHETIC = "aesthetic"
    SEASONAL = "seasonal"
    COMMUNITY = "community"


@dataclass
class Style:
    """A character substitution table plus display metadata.

    Attributes:
        id: Style identifier, unique within its pack
        name: Human-readable name
        preview: Sample text rendered in this style
        mapping: Source character to replacement string (may be several code points)
    """

    id: str
    name: str
    preview: str
    mapping: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the pack JSON shape.

        Returns:
            Dictionary representation of the style
        """
        return {
            "id": self.id,
            "name": self.name,
            "preview": self.preview,
            "mapping": dict(self.mapping),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Style":
        """Deserialize from the pack JSON shape.

        Args:
            data: Dictionary representation of a style

        Returns:
            Style instance
        """
        mapping = data.get("mapping")
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            preview=data.get("preview", ""),
            mapping=dict(mapping) if isinstance(mapping, dict) else {},
        )


@dataclass
class Decorator:
    """A text template that wraps styled output.

    Attributes:
        id: Decorator identifier, unique within its pack
        name: Human-readable name
        pattern: Template containing the ``{text}`` placeholder
        color: Optional display colour
    """

    id: str
    name: str
    pattern: str
    color: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the pack JSON shape."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "pattern": self.pattern,
        }
        if self.color is not None:
            data["color"] = self.color
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Decorator":
        """Deserialize from the pack JSON shape."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            pattern=data.get("pattern", ""),
            color=data.get("color"),
        )


@dataclass
class FontPack:
    """A named, versioned bundle of styles and decorators.

    Attributes:
        id: Pack identifier
        name: Human-readable name
        category: One of the PackCategory values
        version: Pack version string
        description: Free-form description
        price: Price, 0 for free packs
        styles: Styles in declaration order
        decorators: Decorators in declaration order
        preview_image: Optional preview image URL
    """

    id: str
    name: str
    category: str
    version: str
    description: str = ""
    price: float = 0
    styles: list[Style] = field(default_factory=list)
    decorators: list[Decorator] = field(default_factory=list)
    preview_image: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.category, PackCategory):
            self.category = self.category.value

    @property
    def is_free(self) -> bool:
        """True if the pack costs nothing."""
        return _has_numeric_price(self) and self.price == 0

    @property
    def is_premium(self) -> bool:
        """True if the pack has a positive price.

        A non-numeric price (only possible after lenient validation) makes
        the pack neither free nor premium.
        """
        return _has_numeric_price(self) and self.price > 0

    def get_style(self, style_id: str) -> Style | None:
        """Find a style by id.

        Returns:
            The first style with a matching id, or None
        """
        return next((s for s in self.styles if s.id == style_id), None)

    def get_decorator(self, decorator_id: str) -> Decorator | None:
        """Find a decorator by id.

        Returns:
            The first decorator with a matching id, or None
        """
        return next((d for d in self.decorators if d.id == decorator_id), None)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the pack JSON shape.

        Returns:
            Dictionary with camelCase keys, ready for ``json.dump``
        """
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "version": self.version,
            "description": self.description,
            "price": self.price,
            "styles": [s.to_dict() for s in self.styles],
            "decorators": [d.to_dict() for d in self.decorators],
        }
        if self.preview_image is not None:
            data["previewImage"] = self.preview_image
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontPack":
        """Deserialize from the pack JSON shape.

        No validation happens here; run the data through PackValidator first
        when it comes from an untrusted source.

        Args:
            data: Dictionary representation of a pack

        Returns:
            FontPack instance
        """
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            category=data.get("category", ""),
            version=data.get("version", ""),
            description=data.get("description", ""),
            price=data.get("price", 0),
            styles=[Style.from_dict(s) for s in data.get("styles") or []],
            decorators=[Decorator.from_dict(d) for d in data.get("decorators") or []],
            preview_image=data.get("previewImage"),
        )


def _has_numeric_price(pack: FontPack) -> bool:
    return isinstance(pack.price, Real) and not isinstance(pack.price, bool)

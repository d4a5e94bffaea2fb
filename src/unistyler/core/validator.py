"""Font pack validation.

Packs arrive as parsed JSON from hand-authored files or an admin backend, so
the validator accepts any mapping and never assumes a field has the right
type. Every violation is collected; validation never stops at the first one.

Two tiers share one implementation:

- The base checks (required fields, style ids, baseline coverage, mapping
  value types) always run.
- Strict mode adds category, price, style metadata, decorator and
  duplicate-id checks.
"""

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any

from unistyler.domain import TEXT_PLACEHOLDER, FontPack, PackCategory, ValidationResult

BASELINE_CHARACTERS = (
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "0123456789"
    " .,!?"
)

VALID_CATEGORIES = tuple(category.value for category in PackCategory)


def missing_baseline_characters(mapping: Mapping[str, Any] | None) -> list[str]:
    """List baseline characters absent from a mapping, in baseline order."""
    keys = mapping.keys() if isinstance(mapping, Mapping) else ()
    mapped = set(keys)
    return [char for char in BASELINE_CHARACTERS if char not in mapped]


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


class PackValidator:
    """Checks the structural integrity of a font pack.

    Example:
        validator = PackValidator(strict=True)
        result = validator.validate(pack_data)
        if not result.valid:
            print("\\n".join(result.errors))
    """

    def __init__(self, strict: bool = False) -> None:
        """Initialize the validator.

        Args:
            strict: Also run the authoring-tool checks
        """
        self.strict = strict

    def validate(self, pack: FontPack | Mapping[str, Any]) -> ValidationResult:
        """Validate a pack.

        Args:
            pack: A FontPack or its JSON representation

        Returns:
            ValidationResult holding every issue found
        """
        data = pack.to_dict() if isinstance(pack, FontPack) else pack
        result = ValidationResult()

        if not isinstance(data, Mapping):
            result.add("pack", "Pack must be a JSON object")
            return result

        if not _is_present(data.get("id")):
            result.add("id", "Pack missing id")
        if not _is_present(data.get("name")):
            result.add("name", "Pack missing name")
        if not _is_present(data.get("version")):
            result.add("version", "Pack missing version")

        styles = data.get("styles")
        if not isinstance(styles, list):
            result.add("styles", "Pack missing styles array")
            styles = []

        for index, style in enumerate(styles):
            style = style if isinstance(style, Mapping) else {}
            style_id = style.get("id")
            if not _is_present(style_id):
                result.add(f"styles[{index}].id", "Style missing id")
                continue

            mapping = style.get("mapping")
            missing = missing_baseline_characters(mapping)
            if missing:
                result.add(
                    f"styles[{index}].mapping",
                    f"Style {style_id} missing mappings for: {', '.join(missing)}",
                )
            # CharacterMapper.transform joins the values
            if isinstance(mapping, Mapping) and not all(
                isinstance(key, str) and isinstance(value, str) for key, value in mapping.items()
            ):
                result.add(
                    f"styles[{index}].mapping",
                    f"Style {style_id} mapping keys and values must be strings",
                )

        if self.strict:
            self._validate_strict(data, styles, result)

        return result

    def _validate_strict(
        self,
        data: Mapping[str, Any],
        styles: list[Any],
        result: ValidationResult,
    ) -> None:
        if data.get("category") not in VALID_CATEGORIES:
            result.add(
                "category",
                f"Pack category must be one of: {', '.join(VALID_CATEGORIES)}",
            )

        price = data.get("price")
        # bool is a Real subclass; json.loads accepts NaN and Infinity
        if (
            isinstance(price, bool)
            or not isinstance(price, Real)
            or (isinstance(price, float) and not math.isfinite(price))
            or price < 0
        ):
            result.add("price", "Pack price must be a non-negative number")

        if isinstance(data.get("styles"), list) and not styles:
            result.add("styles", "Pack must have at least one style")

        seen_styles: set[str] = set()
        for index, style in enumerate(styles):
            style = style if isinstance(style, Mapping) else {}
            style_id = style.get("id")
            if _is_present(style_id):
                if style_id in seen_styles:
                    result.add(f"styles[{index}].id", f"Duplicate style id: {style_id}")
                seen_styles.add(style_id)
            else:
                style_id = f"#{index}"

            if not _is_present(style.get("name")):
                result.add(f"styles[{index}].name", f"Style {style_id} missing name")
            if not _is_present(style.get("preview")):
                result.add(f"styles[{index}].preview", f"Style {style_id} missing preview")
            if not isinstance(style.get("mapping"), Mapping):
                result.add(
                    f"styles[{index}].mapping",
                    f"Style {style_id} mapping must be an object",
                )

        decorators = data.get("decorators")
        if not isinstance(decorators, list):
            result.add("decorators", "Pack must have a decorators array (can be empty)")
            return

        seen_decorators: set[str] = set()
        for index, decorator in enumerate(decorators):
            decorator = decorator if isinstance(decorator, Mapping) else {}
            decorator_id = decorator.get("id")
            if not _is_present(decorator_id):
                result.add(f"decorators[{index}].id", "Decorator missing id")
                decorator_id = f"#{index}"
            elif decorator_id in seen_decorators:
                result.add(
                    f"decorators[{index}].id",
                    f"Duplicate decorator id: {decorator_id}",
                )
            else:
                seen_decorators.add(decorator_id)

            if not _is_present(decorator.get("name")):
                result.add(
                    f"decorators[{index}].name",
                    f"Decorator {decorator_id} missing name",
                )

            pattern = decorator.get("pattern")
            if not _is_present(pattern):
                result.add(
                    f"decorators[{index}].pattern",
                    f"Decorator {decorator_id} missing pattern",
                )
            elif TEXT_PLACEHOLDER not in pattern:
                result.add(
                    f"decorators[{index}].pattern",
                    f"Decorator {decorator_id} pattern must include {TEXT_PLACEHOLDER} placeholder",
                )


def validate_pack(pack: FontPack | Mapping[str, Any], strict: bool = False) -> ValidationResult:
    """Validate a pack with a one-off PackValidator."""
    return PackValidator(strict=strict).validate(pack)

"""Pack registry: the authoritative store of validated font packs."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from unistyler.config import ValidationConfig
from unistyler.core.validator import PackValidator
from unistyler.domain import FontPack, PackCategory, ValidationResult
from unistyler.exceptions import PackValidationError

logger = logging.getLogger(__name__)


class PackRegistry:
    """In-memory store of validated font packs, keyed by pack id.

    A pack is validated when it is loaded and is either stored whole or
    rejected whole. Loading a pack whose id is already present replaces it.

    The registry does no locking. When shared between threads, callers must
    serialize ``load_pack``, ``remove_pack`` and ``clear_all``.

    Example:
        registry = PackRegistry()
        registry.load_packs(packs)
        registry.get_free_packs()
    """

    def __init__(
        self,
        validator: PackValidator | None = None,
        config: ValidationConfig | None = None,
    ) -> None:
        """Initialize an empty registry.

        Args:
            validator: Validator to run on every load (built from config if None)
            config: Validation settings used when no validator is given
        """
        if validator is None:
            config = config or ValidationConfig()
            validator = PackValidator(strict=config.strict)
        self._validator = validator
        self._packs: dict[str, FontPack] = {}

    @property
    def validator(self) -> PackValidator:
        return self._validator

    def validate_pack(self, pack: FontPack | Mapping[str, Any]) -> ValidationResult:
        """Validate a pack without loading it."""
        return self._validator.validate(pack)

    def load_pack(self, pack: FontPack | Mapping[str, Any]) -> FontPack:
        """Validate and store a pack.

        Args:
            pack: A FontPack or its JSON representation

        Returns:
            The stored FontPack

        Raises:
            PackValidationError: If the pack fails validation or cannot be
                converted to a FontPack; nothing is stored
        """
        result = self._validator.validate(pack)
        if not result.valid:
            pack_id = _pack_id(pack)
            logger.debug("Pack rejected: %s (%d errors)", pack_id, len(result.errors))
            raise PackValidationError(pack_id, result.errors)

        if isinstance(pack, FontPack):
            font_pack = pack
        else:
            # The lenient checks leave decorator and pack metadata unchecked
            try:
                font_pack = FontPack.from_dict(dict(pack))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                pack_id = _pack_id(pack)
                logger.debug("Pack rejected: %s (malformed: %r)", pack_id, e)
                raise PackValidationError(
                    pack_id, [f"Pack could not be read: {type(e).__name__}: {e}"]
                ) from e

        replaced = font_pack.id in self._packs
        self._packs[font_pack.id] = font_pack
        logger.debug(
            "Pack %s: %s v%s (%d styles)",
            "replaced" if replaced else "loaded",
            font_pack.id,
            font_pack.version,
            len(font_pack.styles),
        )
        return font_pack

    def load_packs(self, packs: Iterable[FontPack | Mapping[str, Any]]) -> list[FontPack]:
        """Load packs in order, stopping at the first invalid one.

        Packs loaded before the failing one stay loaded.

        Raises:
            PackValidationError: For the first pack that fails validation
        """
        return [self.load_pack(pack) for pack in packs]

    def get_pack(self, pack_id: str) -> FontPack | None:
        return self._packs.get(pack_id)

    def get_installed_packs(self) -> list[FontPack]:
        """All loaded packs in insertion order."""
        return list(self._packs.values())

    def get_packs_by_category(self, category: PackCategory | str) -> list[FontPack]:
        category = category.value if isinstance(category, PackCategory) else category
        return [pack for pack in self._packs.values() if pack.category == category]

    def get_free_packs(self) -> list[FontPack]:
        return [pack for pack in self._packs.values() if pack.is_free]

    def get_premium_packs(self) -> list[FontPack]:
        return [pack for pack in self._packs.values() if pack.is_premium]

    def is_pack_loaded(self, pack_id: str) -> bool:
        return pack_id in self._packs

    def remove_pack(self, pack_id: str) -> bool:
        """Remove a pack.

        Returns:
            True if a pack was removed, False if none was loaded under that id
        """
        removed = self._packs.pop(pack_id, None) is not None
        if removed:
            logger.debug("Pack removed: %s", pack_id)
        return removed

    def clear_all(self) -> None:
        self._packs.clear()

    def get_pack_count(self) -> int:
        return len(self._packs)

    def __len__(self) -> int:
        return len(self._packs)

    def __contains__(self, pack_id: object) -> bool:
        return pack_id in self._packs


def _pack_id(pack: FontPack | Mapping[str, Any]) -> str:
    if isinstance(pack, FontPack):
        return pack.id
    if isinstance(pack, Mapping):
        pack_id = pack.get("id")
        return pack_id if isinstance(pack_id, str) else ""
    return ""

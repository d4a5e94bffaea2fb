"""Style engine: resolves a pack/style pair and runs the transform pipeline."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from unistyler.config import EngineConfig
from unistyler.core.mapper import CharacterMapper
from unistyler.core.registry import PackRegistry
from unistyler.domain import TEXT_PLACEHOLDER, Decorator, FontPack, StyledResult
from unistyler.exceptions import PackNotFoundError, StyleNotFoundError

logger = logging.getLogger(__name__)


class StyleEngine:
    """Applies styles and decorators to text.

    The engine keeps its own map of packs and does not validate them: packs
    are expected to come from a PackRegistry or another trusted source. Use
    ``StyleEngine.from_registry`` to build one from a populated registry.

    Example:
        engine = StyleEngine.from_registry(registry)
        engine.apply_style("Hello", "bold").styled
    """

    def __init__(
        self,
        mapper: CharacterMapper | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            mapper: Character mapper to drive (a new one if None)
            config: Engine settings (defaults if None)
        """
        self._mapper = mapper if mapper is not None else CharacterMapper()
        self._config = config or EngineConfig()
        self._loaded_packs: dict[str, FontPack] = {}

    @classmethod
    def from_registry(
        cls,
        registry: PackRegistry,
        mapper: CharacterMapper | None = None,
        config: EngineConfig | None = None,
    ) -> "StyleEngine":
        """Build an engine holding every pack installed in ``registry``.

        Packs are shared by reference and are not validated again.
        """
        engine = cls(mapper=mapper, config=config)
        for pack in registry.get_installed_packs():
            engine.load_pack(pack)
        return engine

    @property
    def default_pack_id(self) -> str:
        return self._config.default_pack_id

    def load_pack(self, pack: FontPack | Mapping[str, Any]) -> None:
        """Store a pack for lookup, replacing any pack with the same id."""
        font_pack = pack if isinstance(pack, FontPack) else FontPack.from_dict(dict(pack))
        self._loaded_packs[font_pack.id] = font_pack

    def apply_style(
        self,
        text: str,
        style_id: str,
        pack_id: str | None = None,
        decorator_id: str | None = None,
    ) -> StyledResult:
        """Apply a single style, and optionally a decorator, to text.

        An unknown ``decorator_id`` is ignored and the undecorated text is
        returned.

        Args:
            text: Input text
            style_id: Style to apply
            pack_id: Pack holding the style (the configured default if None)
            decorator_id: Decorator to wrap the result in

        Returns:
            StyledResult for this call

        Raises:
            PackNotFoundError: If the pack is not loaded
            StyleNotFoundError: If the pack has no such style
        """
        if pack_id is None:
            pack_id = self.default_pack_id

        pack = self._loaded_packs.get(pack_id)
        if pack is None:
            raise PackNotFoundError(pack_id)

        style = pack.get_style(style_id)
        if style is None:
            raise StyleNotFoundError(style_id, pack_id)

        self._mapper.load_mapping(style)
        styled = self._mapper.transform(text)

        if decorator_id:
            decorator = pack.get_decorator(decorator_id)
            if decorator is not None:
                styled = self.apply_decorator(styled, decorator)
            else:
                logger.debug("Decorator %s not in pack %s, skipped", decorator_id, pack_id)

        return StyledResult(
            original=text,
            styled=styled,
            style_id=f"{pack_id}_{style_id}",
            pack_id=pack_id,
        )

    def apply_multiple_styles(
        self,
        text: str,
        style_ids: Iterable[str],
        pack_id: str | None = None,
    ) -> list[StyledResult]:
        """Apply each style to the same text, in order.

        The first failing style aborts the whole call.
        """
        return [self.apply_style(text, style_id, pack_id) for style_id in style_ids]

    def apply_decorator(self, text: str, decorator: Decorator) -> str:
        """Substitute ``text`` into the decorator pattern.

        Only the first ``{text}`` token is replaced; any later ones are left
        verbatim.
        """
        return decorator.pattern.replace(TEXT_PLACEHOLDER, text, 1)

    def apply_style_with_decorator(
        self,
        text: str,
        style_id: str,
        decorator_id: str,
        pack_id: str | None = None,
    ) -> str:
        """Apply a style and decorator, returning only the styled text."""
        return self.apply_style(text, style_id, pack_id, decorator_id).styled

    def get_loaded_packs(self) -> list[FontPack]:
        return list(self._loaded_packs.values())

    def get_pack(self, pack_id: str) -> FontPack | None:
        return self._loaded_packs.get(pack_id)

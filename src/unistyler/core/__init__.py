"""Style transformation core for unistyler.

This module contains the components that validate font packs and apply
their styles to text.

Key components:
- CharacterMapper: Per-character substitution with identity fallback
- PackValidator: Structural checks on untrusted pack JSON
- PackRegistry: Store of validated packs, keyed by id
- StyleEngine: Resolves a pack/style pair and decorates the result
"""

from unistyler.core.engine import StyleEngine
from unistyler.core.mapper import CharacterMapper
from unistyler.core.registry import PackRegistry
from unistyler.core.text import sanitize_text, validate_text_input
from unistyler.core.validator import (
    BASELINE_CHARACTERS,
    VALID_CATEGORIES,
    PackValidator,
    missing_baseline_characters,
    validate_pack,
)

__all__ = [
    "BASELINE_CHARACTERS",
    "CharacterMapper",
    "PackRegistry",
    "PackValidator",
    "StyleEngine",
    "VALID_CATEGORIES",
    "missing_baseline_characters",
    "sanitize_text",
    "validate_pack",
    "validate_text_input",
]

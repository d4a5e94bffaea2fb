"""Domain models for unistyler.

This module contains the data model for font packs and the values produced
when packs are validated or applied to text.

Key classes:
- Style: A per-character substitution table
- Decorator: A ``{text}`` template wrapped around styled output
- FontPack: A versioned bundle of styles and decorators
- StyledResult: Output of one style application
- ValidationResult: Every issue found in a pack
"""

from unistyler.domain.pack import TEXT_PLACEHOLDER, Decorator, FontPack, PackCategory, Style
from unistyler.domain.result import StyledResult, ValidationIssue, ValidationResult

__all__: list[str] = [
    # Enums
    "PackCategory",
    # Pack types
    "Style",
    "Decorator",
    "FontPack",
    "TEXT_PLACEHOLDER",
    # Results
    "StyledResult",
    "ValidationIssue",
    "ValidationResult",
]

"""Character-by-character Unicode substitution.

Text is walked one code point at a time, which is how Python iterates a
``str``. An emoji outside the Basic Multilingual Plane is therefore a single
unit and passes through whole when it is not mapped. Multi-code-point
grapheme clusters (flags, ZWJ sequences, a letter followed by a combining
mark) are not segmented: each code point is looked up on its own.
"""

from unistyler.core.validator import missing_baseline_characters
from unistyler.domain import Style


class CharacterMapper:
    """Holds one active mapping and applies it to text.

    Example:
        mapper = CharacterMapper()
        mapper.load_mapping(style)
        mapper.transform("Hello")
    """

    def __init__(self) -> None:
        self._mapping: dict[str, str] = {}

    @property
    def mapping(self) -> dict[str, str]:
        """Copy of the active mapping."""
        return dict(self._mapping)

    def load_mapping(self, style: Style) -> None:
        """Replace the active mapping with a copy of the style's mapping.

        Args:
            style: Style whose mapping becomes active
        """
        self._mapping = dict(style.mapping)

    def transform(self, text: str) -> str:
        """Substitute every mapped character in ``text``.

        Unmapped characters, and characters mapped to an empty string, are
        emitted unchanged.

        Args:
            text: Input text

        Returns:
            Transformed text
        """
        mapping = self._mapping
        return "".join(mapping.get(char) or char for char in text)

    def validate_mapping(self) -> bool:
        """Check that the active mapping covers the baseline character set."""
        return not missing_baseline_characters(self._mapping)

    def clear(self) -> None:
        """Drop the active mapping; transform becomes the identity."""
        self._mapping = {}

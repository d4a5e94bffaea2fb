"""Checks applied to user text before it is styled."""

from typing import Any

from unistyler.exceptions import TextInputError

DEFAULT_MAX_LENGTH = 200


def validate_text_input(text: Any, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Check that ``text`` is a string no longer than ``max_length``.

    Length is counted in code points.

    Returns:
        The text, unchanged

    Raises:
        TextInputError: If the input is not a string or is too long
    """
    if not isinstance(text, str):
        raise TextInputError("Input must be a string")
    if len(text) > max_length:
        raise TextInputError(f"Text exceeds maximum length of {max_length} characters")
    return text


def sanitize_text(text: str) -> str:
    """Strip surrounding whitespace, keeping every other character."""
    return text.strip()

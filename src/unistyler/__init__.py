"""Unistyler - Decorate plain text with Unicode font packs.

Unistyler turns plain text into stylised Unicode variants (bold, italic,
monospace, double-struck, ...) by substituting each character through a
mapping table. Mapping tables ship in versioned font packs that are validated
before they are used.

Example:
    $ unistyler style "Hello" --style bold

This prints 𝐇𝐞𝐥𝐥𝐨 using the bundled default pack.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

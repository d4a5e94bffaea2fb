"""Pack file I/O for unistyler.

Key classes:
- PackReader: Locate and parse font pack JSON files
"""

from unistyler.io.reader import PACK_SUFFIX, PackReader

__all__ = [
    "PACK_SUFFIX",
    "PackReader",
]

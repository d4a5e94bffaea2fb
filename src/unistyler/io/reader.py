"""Font pack file reader.

This module locates pack JSON files on disk and parses them into plain
dictionaries. Parsed data is untrusted: pass it through a PackRegistry or
PackValidator before use.
"""

import json
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

from unistyler.exceptions import PackLoadError

PACK_SUFFIX = ".json"


class PackReader:
    """Finds and reads font pack files in a packs directory.

    Example:
        reader = PackReader(Path("data/packs"))
        for path, data in reader.read_all():
            ...
    """

    def __init__(self, packs_dir: Path) -> None:
        """Initialize the reader.

        Args:
            packs_dir: Directory holding ``*.json`` pack files
        """
        self._packs_dir = Path(packs_dir)

    @property
    def packs_dir(self) -> Path:
        return self._packs_dir

    def resolve(self, names: Sequence[str] | None = None) -> list[Path]:
        """Return the pack files to read.

        Args:
            names: Pack names, with or without the ``.json`` suffix. When
                empty, every ``*.json`` file in the directory is returned.

        Returns:
            Pack file paths (sorted when scanning the directory)

        Raises:
            PackLoadError: If the directory must be scanned and cannot be
        """
        if names:
            return [
                self._packs_dir / (name if name.endswith(PACK_SUFFIX) else f"{name}{PACK_SUFFIX}")
                for name in names
            ]

        if not self._packs_dir.is_dir():
            raise PackLoadError(str(self._packs_dir), "packs directory not found")
        try:
            return sorted(p for p in self._packs_dir.glob(f"*{PACK_SUFFIX}") if p.is_file())
        except OSError as e:
            raise PackLoadError(str(self._packs_dir), str(e)) from e

    def read(self, path: Path) -> dict[str, Any]:
        """Parse one pack file.

        Raises:
            PackLoadError: If the file is missing, is not valid JSON, or does
                not hold a JSON object
        """
        try:
            content = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise PackLoadError(str(path), "file not found") from e
        except (OSError, UnicodeDecodeError) as e:
            raise PackLoadError(str(path), str(e)) from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise PackLoadError(str(path), f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise PackLoadError(str(path), "top-level value must be an object")
        return data

    def read_all(
        self, names: Sequence[str] | None = None
    ) -> Iterator[tuple[Path, dict[str, Any] | PackLoadError]]:
        """Read every resolved pack file.

        A file that cannot be read yields its PackLoadError in place of the
        data so one bad file does not hide the rest.

        Raises:
            PackLoadError: If the packs directory cannot be scanned
        """
        for path in self.resolve(names):
            try:
                yield path, self.read(path)
            except PackLoadError as e:
                yield path, e

"""Exception hierarchy for Unistyler."""


class UnistylerError(Exception):
    """Base exception for all Unistyler errors."""

    pass


class PackError(UnistylerError):
    """Errors related to font packs."""

    pass


class PackValidationError(PackError):
    """A font pack failed validation and was not loaded."""

    def __init__(self, pack_id: str, errors: list[str]) -> None:
        self.pack_id = pack_id
        self.errors = list(errors)
        message = "\n".join(self.errors)
        super().__init__(f"Invalid pack: {pack_id}\n{message}")


class PackLoadError(PackError):
    """Error reading a font pack file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load pack '{path}': {reason}")


class PackNotFoundError(PackError):
    """Requested pack is not loaded."""

    def __init__(self, pack_id: str) -> None:
        self.pack_id = pack_id
        super().__init__(f"Pack not found: {pack_id}")


class StyleError(UnistylerError):
    """Errors related to styles."""

    pass


class StyleNotFoundError(StyleError):
    """Requested style does not exist in the pack."""

    def __init__(self, style_id: str, pack_id: str) -> None:
        self.style_id = style_id
        self.pack_id = pack_id
        super().__init__(f"Style not found: {style_id} in pack {pack_id}")


class TextInputError(UnistylerError):
    """Text rejected before styling."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

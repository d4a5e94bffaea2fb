"""Results produced by validation and styling."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StyledResult:
    """Outcome of applying one style to a piece of text.

    Attributes:
        original: Input text
        styled: Transformed (and possibly decorated) text
        style_id: Composite id, ``"<pack_id>_<style_id>"``
        pack_id: Pack the style came from
    """

    original: str
    styled: str
    style_id: str
    pack_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "original": self.original,
            "styled": self.styled,
            "styleId": self.style_id,
            "packId": self.pack_id,
        }


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation failure.

    Attributes:
        field: Path of the offending field (e.g. ``styles[0].mapping``)
        message: Human-readable message
    """

    field: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ValidationResult:
    """Every issue found while validating a pack."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues

    @property
    def errors(self) -> list[str]:
        """Issue messages in the order the checks ran."""
        return [issue.message for issue in self.issues]

    def add(self, field_name: str, message: str) -> None:
        self.issues.append(ValidationIssue(field_name, message))

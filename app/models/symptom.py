"""Explicitly selected symptom records."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.core.exceptions import InvalidSymptomError


class SymptomCategory(str, Enum):
    """Body-system category of a catalog symptom."""

    PAIN = "pain"
    FEVER = "fever"
    RESPIRATORY = "respiratory"
    DIGESTIVE = "digestive"
    NEUROLOGICAL = "neurological"
    OTHER = "other"


class SymptomSeverity(str, Enum):
    """Severity attached to a catalog symptom."""

    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


@dataclass(frozen=True)
class SelectedSymptom:
    """A symptom chosen from the catalog rather than mined from text."""

    id: str
    name: str
    category: SymptomCategory
    severity: SymptomSeverity

    def __post_init__(self) -> None:
        # Plain string values are accepted when they name a member
        try:
            object.__setattr__(self, "category", SymptomCategory(self.category))
        except ValueError as e:
            raise InvalidSymptomError(
                f"Invalid symptom category for {self.id!r}: {self.category!r}"
            ) from e
        try:
            object.__setattr__(self, "severity", SymptomSeverity(self.severity))
        except ValueError as e:
            raise InvalidSymptomError(
                f"Invalid symptom severity for {self.id!r}: {self.severity!r}"
            ) from e

    @property
    def label(self) -> str:
        """Label merged into session state, e.g. ``"Chest Pain (severe)"``."""
        return f"{self.name} ({self.severity.value})"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SelectedSymptom":
        """Build a SelectedSymptom, validating category and severity.

        Raises:
            InvalidSymptomError: If a field is missing or an enum value is
                outside the fixed category/severity sets.
        """
        try:
            return cls(
                id=str(data["id"]),
                name=str(data["name"]),
                category=data["category"],
                severity=data["severity"],
            )
        except KeyError as e:
            raise InvalidSymptomError(f"Selected symptom missing field: {e.args[0]}") from e

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "severity": self.severity.value,
        }

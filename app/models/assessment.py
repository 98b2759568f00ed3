"""Turn classification and risk assessment outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class TurnClassification(str, Enum):
    """Conversational intent of an assistant utterance.

    Total: unmatched text classifies as GENERAL.
    """

    EMERGENCY = "emergency"
    MEDICAL_ADVICE = "medical-advice"
    HISTORY_COLLECTION = "history-collection"
    GENERAL = "general"


class RiskLevel(str, Enum):
    """Triage risk tier."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class RiskAssessment:
    """Result of risk analysis over a symptom collection.

    Produced fresh for each request and never stored.
    """

    risk_level: RiskLevel
    red_flags: list[str]
    suggested_actions: list[str]
    follow_up_recommendations: list[str]
    rules_fired: list[str] = field(default_factory=list)
    ruleset_version: str = "unknown"
    ruleset_hash: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "risk_level": self.risk_level.value,
            "red_flags": list(self.red_flags),
            "suggested_actions": list(self.suggested_actions),
            "follow_up_recommendations": list(self.follow_up_recommendations),
            "rules_fired": list(self.rules_fired),
            "ruleset_version": self.ruleset_version,
            "ruleset_hash": self.ruleset_hash,
        }


@dataclass
class MedicalReport:
    """Structured report combining session state with its risk assessment."""

    record_id: str
    generated_at: datetime
    symptoms: list[str]
    medications: list[str]
    allergies: list[str]
    analysis: RiskAssessment
    disclaimer: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "record_id": self.record_id,
            "generated_at": self.generated_at.isoformat(),
            "clinical_data": {
                "symptoms": list(self.symptoms),
                "current_medications": list(self.medications),
                "allergies": list(self.allergies),
            },
            "analysis": self.analysis.to_dict(),
            "next_steps": {
                "immediate_actions": list(self.analysis.suggested_actions),
                "follow_up": list(self.analysis.follow_up_recommendations),
                "warnings": list(self.analysis.red_flags),
            },
            "disclaimer": self.disclaimer,
        }

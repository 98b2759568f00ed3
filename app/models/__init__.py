"""Domain models for the intake signal engine."""

from app.models.assessment import MedicalReport, RiskAssessment, RiskLevel, TurnClassification
from app.models.conversation import ConversationState, ExtractedSignal, Role, Utterance
from app.models.symptom import SelectedSymptom, SymptomCategory, SymptomSeverity

__all__ = [
    "Utterance",
    "Role",
    "ExtractedSignal",
    "ConversationState",
    "SelectedSymptom",
    "SymptomCategory",
    "SymptomSeverity",
    "TurnClassification",
    "RiskLevel",
    "RiskAssessment",
    "MedicalReport",
]

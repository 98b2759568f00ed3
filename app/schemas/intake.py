"""Intake engine request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.assessment import MedicalReport, RiskAssessment, TurnClassification
from app.models.conversation import ConversationState, ExtractedSignal
from app.models.symptom import SelectedSymptom


class TurnCreate(BaseModel):
    """Schema for submitting a conversational turn."""

    text: str = Field(..., max_length=10000)


class ExtractedSignalRead(BaseModel):
    """Schema for signal extracted from one user turn."""

    symptoms: list[str]
    medications: list[str]
    allergy_mentions: list[str]

    @classmethod
    def from_signal(cls, signal: ExtractedSignal, ordered_symptoms: list[str]) -> "ExtractedSignalRead":
        return cls(
            symptoms=ordered_symptoms,
            medications=list(signal.medications),
            allergy_mentions=list(signal.allergy_mentions),
        )


class TurnClassificationRead(BaseModel):
    """Schema for an assistant turn classification."""

    classification: TurnClassification


class SelectedSymptomIn(BaseModel):
    """Schema for a symptom picked from the catalog.

    Category and severity are validated by the engine so that values outside
    the fixed enumerations surface as InvalidSymptomError.
    """

    id: str
    name: str
    category: str
    severity: str


class SelectedSymptomsSubmit(BaseModel):
    """Schema for submitting catalog selections."""

    symptoms: list[SelectedSymptomIn] = Field(..., min_length=1)


class CatalogSymptomRead(BaseModel):
    """Schema for a catalog entry."""

    id: str
    name: str
    category: str
    severity: str

    @classmethod
    def from_symptom(cls, symptom: SelectedSymptom) -> "CatalogSymptomRead":
        return cls(**symptom.to_dict())


class ConversationStateRead(BaseModel):
    """Schema for a session snapshot."""

    session_id: str
    symptoms: list[str]
    medications: list[str]
    allergy_mentions: list[str]
    user_turns: int

    @classmethod
    def from_state(cls, session_id: str, state: ConversationState) -> "ConversationStateRead":
        return cls(session_id=session_id, **state.to_dict())


class SymptomListAssess(BaseModel):
    """Schema for assessing an explicit symptom list."""

    symptoms: list[str] = Field(default_factory=list)


class RiskAssessmentRead(BaseModel):
    """Schema for a risk assessment."""

    risk_level: str
    red_flags: list[str]
    suggested_actions: list[str]
    follow_up_recommendations: list[str]
    rules_fired: list[str]
    ruleset_version: str
    ruleset_hash: str

    @classmethod
    def from_assessment(cls, assessment: RiskAssessment) -> "RiskAssessmentRead":
        return cls(**assessment.to_dict())


class ClinicalData(BaseModel):
    symptoms: list[str]
    current_medications: list[str]
    allergies: list[str]


class NextSteps(BaseModel):
    immediate_actions: list[str]
    follow_up: list[str]
    warnings: list[str]


class MedicalReportRead(BaseModel):
    """Schema for a generated medical report."""

    record_id: str
    generated_at: datetime
    clinical_data: ClinicalData
    analysis: RiskAssessmentRead
    next_steps: NextSteps
    disclaimer: str

    @classmethod
    def from_report(cls, report: MedicalReport) -> "MedicalReportRead":
        return cls.model_validate(report.to_dict())

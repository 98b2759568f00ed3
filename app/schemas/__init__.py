"""Pydantic schemas for API request/response validation."""

from app.schemas.intake import (
    CatalogSymptomRead,
    ConversationStateRead,
    ExtractedSignalRead,
    MedicalReportRead,
    RiskAssessmentRead,
    SelectedSymptomIn,
    SelectedSymptomsSubmit,
    SymptomListAssess,
    TurnClassificationRead,
    TurnCreate,
)

__all__ = [
    "TurnCreate",
    "ExtractedSignalRead",
    "TurnClassificationRead",
    "SelectedSymptomIn",
    "SelectedSymptomsSubmit",
    "CatalogSymptomRead",
    "ConversationStateRead",
    "SymptomListAssess",
    "RiskAssessmentRead",
    "MedicalReportRead",
]

"""Medical report generation from accumulated session state."""

from datetime import datetime

from app.extraction.symptoms import order_symptoms
from app.models.assessment import MedicalReport, RiskAssessment
from app.models.conversation import ConversationState
from app.rules.models import Vocabulary
from app.utils.time import utc_now


def generate_record_id(now: datetime) -> str:
    """Record id derived from the generation time in milliseconds."""
    return f"MR-{int(now.timestamp() * 1000)}"


def build_medical_report(
    state: ConversationState,
    assessment: RiskAssessment,
    vocabulary: Vocabulary,
    disclaimer: str,
    now: datetime | None = None,
) -> MedicalReport:
    """Combine a session snapshot with its risk assessment.

    Args:
        state: Snapshot of the session state
        assessment: Risk assessment computed from the same snapshot
        vocabulary: Used to order symptoms for display
        disclaimer: Fixed disclaimer attached to every report
        now: Generation time (defaults to current UTC time)

    Returns:
        MedicalReport
    """
    generated_at = now or utc_now()

    return MedicalReport(
        record_id=generate_record_id(generated_at),
        generated_at=generated_at,
        symptoms=order_symptoms(state.symptoms, vocabulary),
        medications=list(state.medications),
        allergies=list(state.allergy_mentions),
        analysis=assessment,
        disclaimer=disclaimer,
    )

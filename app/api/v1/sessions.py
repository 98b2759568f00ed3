"""Conversation session endpoints."""

from fastapi import APIRouter, status

from app.api.deps import Engine
from app.api.errors import to_http_exception
from app.core.exceptions import IntakeEngineError
from app.extraction.symptoms import order_symptoms
from app.schemas.intake import (
    ConversationStateRead,
    ExtractedSignalRead,
    MedicalReportRead,
    RiskAssessmentRead,
    SelectedSymptomsSubmit,
    TurnCreate,
)

router = APIRouter()


@router.post(
    "/{session_id}/user-turns",
    response_model=ExtractedSignalRead,
    summary="Record a user turn",
    description="Extract symptoms, medications and allergy mentions and merge them into the session",
)
async def record_user_turn(
    session_id: str,
    payload: TurnCreate,
    engine: Engine,
) -> ExtractedSignalRead:
    """Process one user utterance for a session."""
    try:
        signal = engine.process_user_turn(session_id, payload.text)
    except IntakeEngineError as e:
        raise to_http_exception(e) from e

    return ExtractedSignalRead.from_signal(
        signal,
        order_symptoms(signal.symptoms, engine.ruleset.vocabulary),
    )


@router.post(
    "/{session_id}/selected-symptoms",
    response_model=ConversationStateRead,
    summary="Submit catalog symptoms",
)
async def submit_selected_symptoms(
    session_id: str,
    payload: SelectedSymptomsSubmit,
    engine: Engine,
) -> ConversationStateRead:
    """Merge symptoms picked from the catalog into the session."""
    try:
        state = engine.submit_selected_symptoms(
            session_id,
            [s.model_dump() for s in payload.symptoms],
        )
    except IntakeEngineError as e:
        raise to_http_exception(e) from e

    return ConversationStateRead.from_state(session_id, state)


@router.get(
    "/{session_id}",
    response_model=ConversationStateRead,
    summary="Get session state",
)
async def get_session_state(session_id: str, engine: Engine) -> ConversationStateRead:
    """Return a snapshot of the session's accumulated signal."""
    try:
        state = engine.get_state(session_id)
    except IntakeEngineError as e:
        raise to_http_exception(e) from e

    return ConversationStateRead.from_state(session_id, state)


@router.post(
    "/{session_id}/assessment",
    response_model=RiskAssessmentRead,
    summary="Assess session risk",
)
async def assess_session_risk(session_id: str, engine: Engine) -> RiskAssessmentRead:
    """Assess risk from the session's accumulated symptoms."""
    try:
        assessment = engine.assess_risk(session_id)
    except IntakeEngineError as e:
        raise to_http_exception(e) from e

    return RiskAssessmentRead.from_assessment(assessment)


@router.post(
    "/{session_id}/report",
    response_model=MedicalReportRead,
    summary="Generate medical report",
)
async def generate_report(session_id: str, engine: Engine) -> MedicalReportRead:
    """Build a structured medical report for the session."""
    try:
        report = engine.build_report(session_id)
    except IntakeEngineError as e:
        raise to_http_exception(e) from e

    return MedicalReportRead.from_report(report)


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reset session",
)
async def reset_session(session_id: str, engine: Engine) -> None:
    """Discard the session and its accumulated state."""
    try:
        engine.reset_session(session_id)
    except IntakeEngineError as e:
        raise to_http_exception(e) from e

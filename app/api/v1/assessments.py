"""Stateless classification and assessment endpoints."""

from fastapi import APIRouter, Query

from app.api.deps import Engine
from app.api.errors import to_http_exception
from app.core.exceptions import IntakeEngineError
from app.fixtures.symptom_catalog import list_catalog
from app.models.symptom import SymptomCategory
from app.schemas.intake import (
    CatalogSymptomRead,
    RiskAssessmentRead,
    SymptomListAssess,
    TurnClassificationRead,
    TurnCreate,
)

router = APIRouter()


@router.post(
    "/assistant-turns/classify",
    response_model=TurnClassificationRead,
    summary="Classify an assistant turn",
)
async def classify_assistant_turn(payload: TurnCreate, engine: Engine) -> TurnClassificationRead:
    """Classify assistant reply text into a conversational intent."""
    try:
        classification = engine.process_assistant_turn(payload.text)
    except IntakeEngineError as e:
        raise to_http_exception(e) from e

    return TurnClassificationRead(classification=classification)


@router.post(
    "/assessments",
    response_model=RiskAssessmentRead,
    summary="Assess an explicit symptom list",
)
async def assess_symptom_list(payload: SymptomListAssess, engine: Engine) -> RiskAssessmentRead:
    """Assess risk for a symptom list without creating a session."""
    try:
        assessment = engine.assess_symptom_list(payload.symptoms)
    except IntakeEngineError as e:
        raise to_http_exception(e) from e

    return RiskAssessmentRead.from_assessment(assessment)


@router.get(
    "/symptom-catalog",
    response_model=list[CatalogSymptomRead],
    summary="List selectable symptoms",
)
async def get_symptom_catalog(
    category: SymptomCategory | None = Query(None, description="Filter by category"),
) -> list[CatalogSymptomRead]:
    """Return the fixed symptom catalog."""
    return [CatalogSymptomRead.from_symptom(s) for s in list_catalog(category)]

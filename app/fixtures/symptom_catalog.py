"""Fixed catalog of selectable symptoms.

Patients can pick symptoms from this list instead of typing them. Each
entry carries a category and a default severity.
"""

from app.core.exceptions import InvalidSymptomError
from app.models.symptom import SelectedSymptom, SymptomCategory, SymptomSeverity

_C = SymptomCategory
_S = SymptomSeverity

SYMPTOM_CATALOG: tuple[SelectedSymptom, ...] = (
    # =========================================================================
    # Pain
    # =========================================================================
    SelectedSymptom("headache", "Headache", _C.PAIN, _S.MODERATE),
    SelectedSymptom("chest-pain", "Chest Pain", _C.PAIN, _S.SEVERE),
    SelectedSymptom("abdominal-pain", "Abdominal Pain", _C.PAIN, _S.MODERATE),
    SelectedSymptom("back-pain", "Back Pain", _C.PAIN, _S.MODERATE),
    SelectedSymptom("joint-pain", "Joint Pain", _C.PAIN, _S.MILD),
    # =========================================================================
    # Fever
    # =========================================================================
    SelectedSymptom("fever", "Fever", _C.FEVER, _S.MODERATE),
    SelectedSymptom("chills", "Chills", _C.FEVER, _S.MILD),
    # =========================================================================
    # Respiratory
    # =========================================================================
    SelectedSymptom("cough", "Cough", _C.RESPIRATORY, _S.MILD),
    SelectedSymptom("shortness-of-breath", "Shortness of Breath", _C.RESPIRATORY, _S.SEVERE),
    SelectedSymptom("sore-throat", "Sore Throat", _C.RESPIRATORY, _S.MILD),
    SelectedSymptom("runny-nose", "Runny Nose", _C.RESPIRATORY, _S.MILD),
    # =========================================================================
    # Digestive
    # =========================================================================
    SelectedSymptom("nausea", "Nausea", _C.DIGESTIVE, _S.MODERATE),
    SelectedSymptom("vomiting", "Vomiting", _C.DIGESTIVE, _S.MODERATE),
    SelectedSymptom("diarrhea", "Diarrhea", _C.DIGESTIVE, _S.MODERATE),
    SelectedSymptom("constipation", "Constipation", _C.DIGESTIVE, _S.MILD),
    # =========================================================================
    # Neurological
    # =========================================================================
    SelectedSymptom("dizziness", "Dizziness", _C.NEUROLOGICAL, _S.MODERATE),
    SelectedSymptom("fatigue", "Fatigue", _C.NEUROLOGICAL, _S.MILD),
    SelectedSymptom("confusion", "Confusion", _C.NEUROLOGICAL, _S.SEVERE),
    # =========================================================================
    # Other
    # =========================================================================
    SelectedSymptom("rash", "Skin Rash", _C.OTHER, _S.MILD),
    SelectedSymptom("swelling", "Swelling", _C.OTHER, _S.MODERATE),
    SelectedSymptom("weight-loss", "Unexplained Weight Loss", _C.OTHER, _S.MODERATE),
)

_BY_ID = {symptom.id: symptom for symptom in SYMPTOM_CATALOG}


def list_catalog(category: SymptomCategory | None = None) -> list[SelectedSymptom]:
    """List catalog symptoms, optionally filtered by category."""
    if category is None:
        return list(SYMPTOM_CATALOG)
    return [s for s in SYMPTOM_CATALOG if s.category == category]


def get_catalog_symptom(symptom_id: str) -> SelectedSymptom:
    """Look up a catalog symptom by id.

    Raises:
        InvalidSymptomError: If the id is not in the catalog
    """
    try:
        return _BY_ID[symptom_id]
    except KeyError:
        raise InvalidSymptomError(f"Unknown catalog symptom: {symptom_id}") from None

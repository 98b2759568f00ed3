"""Rule-based extraction of clinical signal from user utterances.

No NLP or ML is involved: extraction is substring and pattern matching
against the vocabulary tables of the loaded ruleset.
"""

from app.extraction.allergies import detect_allergy_mentions
from app.extraction.medications import extract_medications
from app.extraction.normalizer import normalize
from app.extraction.signal import extract_signal
from app.extraction.symptoms import extract_symptoms, order_symptoms

__all__ = [
    "normalize",
    "extract_symptoms",
    "order_symptoms",
    "extract_medications",
    "detect_allergy_mentions",
    "extract_signal",
]

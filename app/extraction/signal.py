"""Per-utterance extraction pipeline."""

from app.extraction.allergies import detect_allergy_mentions
from app.extraction.medications import extract_medications
from app.extraction.normalizer import normalize
from app.extraction.symptoms import extract_symptoms
from app.models.conversation import ExtractedSignal
from app.rules.models import Vocabulary


def extract_signal(text: str, vocabulary: Vocabulary) -> ExtractedSignal:
    """Run the normalizer and all three extractors over one user utterance.

    Raises:
        EmptyInputError: If the text is blank
    """
    normalized = normalize(text)

    return ExtractedSignal(
        symptoms=extract_symptoms(normalized, vocabulary),
        medications=extract_medications(text, normalized, vocabulary),
        allergy_mentions=detect_allergy_mentions(text, normalized, vocabulary),
    )

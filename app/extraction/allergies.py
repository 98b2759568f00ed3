"""Allergy mention detection."""

from app.rules.models import Vocabulary


def detect_allergy_mentions(text: str, normalized: str, vocabulary: Vocabulary) -> list[str]:
    """Capture the whole utterance when it mentions an allergy.

    The full original text is kept rather than a fragment so a human
    reviewer sees the context. Never fails.
    """
    if any(trigger in normalized for trigger in vocabulary.allergy_triggers):
        return [text]
    return []

"""Medication phrase extraction."""

from app.rules.models import Vocabulary


def extract_medications(text: str, normalized: str, vocabulary: Vocabulary) -> list[str]:
    """Extract medication-indicating phrases.

    Activates only when the normalized text contains a trigger word. Matches
    are taken from the original text, so the returned phrases keep the
    speaker's casing (e.g. "taking Ibuprofen"). Every non-overlapping match
    is returned in order of appearance, duplicates included.

    Args:
        text: Original utterance text
        normalized: Normalized form of the same utterance
        vocabulary: Vocabulary tables

    Returns:
        List of "<pattern word> <token>" phrases
    """
    if not any(trigger in normalized for trigger in vocabulary.medication_triggers):
        return []

    return [match.group(0) for match in vocabulary.medication_pattern.finditer(text)]

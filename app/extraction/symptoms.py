"""Symptom keyword extraction.

Keywords are matched as plain substrings of the normalized text. There is
no stemming and no word-boundary check, so "ache" also matches inside
"headache" and "stomachache". Multi-word keywords are checked whole, and a
longer keyword ("chest pain") does not suppress a shorter one ("pain").
"""

from collections.abc import Iterable

from app.rules.models import Vocabulary


def extract_symptoms(normalized: str, vocabulary: Vocabulary) -> set[str]:
    """Return the vocabulary keywords present in the normalized text.

    Never fails; empty text yields an empty set.
    """
    if not normalized:
        return set()
    return {keyword for keyword in vocabulary.symptoms if keyword in normalized}


def order_symptoms(symptoms: Iterable[str], vocabulary: Vocabulary) -> list[str]:
    """Order symptoms by vocabulary position.

    Entries outside the vocabulary (e.g. selected-symptom labels) follow in
    alphabetical order.
    """
    present = set(symptoms)
    ordered = [keyword for keyword in vocabulary.symptoms if keyword in present]
    ordered.extend(sorted(present.difference(vocabulary.symptoms)))
    return ordered

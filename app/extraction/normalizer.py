"""Utterance text normalization."""

from app.core.exceptions import EmptyInputError


def normalize(text: str | None) -> str:
    """Lower-case and trim utterance text.

    Raises:
        EmptyInputError: If nothing is left after trimming
    """
    normalized = (text or "").strip().lower()
    if not normalized:
        raise EmptyInputError("Message is required")
    return normalized

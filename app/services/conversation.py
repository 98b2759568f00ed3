"""Conversation accumulator merging per-turn signal into session state."""

import logging
from collections.abc import Iterable
from typing import Any

from app.core.exceptions import UnknownSessionError
from app.core.logging import audit_logger
from app.extraction.signal import extract_signal
from app.models.conversation import ConversationState, ExtractedSignal
from app.models.symptom import SelectedSymptom
from app.rules.models import Vocabulary
from app.services.session_store import SessionEntry, SessionStore

logger = logging.getLogger(__name__)


def coerce_selected_symptoms(
    symptoms: Iterable[SelectedSymptom | dict[str, Any]],
) -> list[SelectedSymptom]:
    """Validate selected symptoms, converting raw dicts.

    Raises:
        InvalidSymptomError: If any entry is outside the fixed enumerations
    """
    return [
        symptom if isinstance(symptom, SelectedSymptom) else SelectedSymptom.from_dict(symptom)
        for symptom in symptoms
    ]


class ConversationAccumulator:
    """Accumulates extracted signal for one session.

    State only grows: symptoms are unioned, medications and allergy
    mentions are appended without deduplication. Nothing is removed except
    by reset(), which also removes the session from the store.
    """

    def __init__(self, store: SessionStore, session_id: str, vocabulary: Vocabulary) -> None:
        self.store = store
        self.session_id = session_id
        self.vocabulary = vocabulary

    @property
    def _entry(self) -> SessionEntry:
        return self.store.get_or_create(self.session_id)

    def record_user_turn(self, text: str) -> ExtractedSignal:
        """Extract signal from a user utterance and merge it into the session.

        Raises:
            EmptyInputError: If the text is blank
        """
        signal = extract_signal(text, self.vocabulary)

        entry = self._entry
        with entry.lock:
            entry.state.symptoms.update(signal.symptoms)
            entry.state.medications.extend(signal.medications)
            entry.state.allergy_mentions.extend(signal.allergy_mentions)
            entry.state.user_turns += 1

        audit_logger.log(
            action="user_turn_recorded",
            session_id=self.session_id,
            metadata={
                "symptoms": len(signal.symptoms),
                "medications": len(signal.medications),
                "allergy_mentions": len(signal.allergy_mentions),
            },
        )
        return signal

    def record_selected_symptoms(
        self,
        symptoms: Iterable[SelectedSymptom | dict[str, Any]],
    ) -> None:
        """Union catalog selections, labelled with severity, into the session.

        All entries are validated before any is merged.

        Raises:
            InvalidSymptomError: If any entry is invalid
        """
        selected = coerce_selected_symptoms(symptoms)

        entry = self._entry
        with entry.lock:
            entry.state.symptoms.update(s.label for s in selected)

        audit_logger.log(
            action="selected_symptoms_recorded",
            session_id=self.session_id,
            metadata={"count": len(selected)},
        )

    def current_state(self) -> ConversationState:
        """Return a read-only snapshot of the session state.

        A session that does not exist reads back as an empty state and is
        not created.
        """
        try:
            entry = self.store.get(self.session_id)
        except UnknownSessionError:
            return ConversationState()
        with entry.lock:
            return entry.state.copy()

    def reset(self) -> None:
        """Discard the session and all accumulated state.

        Raises:
            UnknownSessionError: If the session was never created or was already reset
        """
        entry = self.store.remove(self.session_id)
        with entry.lock:
            entry.state.clear()

        logger.info(f"Session {self.session_id} reset")
        audit_logger.log(action="session_reset", session_id=self.session_id)

"""Intake engine facade.

Exposes the per-session operations of the engine: processing user and
assistant turns, submitting catalog symptoms, assessing risk and resetting
sessions. The session store is injected; the engine keeps no global state.
"""

import logging
from collections.abc import Iterable
from typing import Any

from app.core.config import Settings, get_settings
from app.core.exceptions import EmptyInputError
from app.core.logging import audit_logger
from app.extraction.symptoms import order_symptoms
from app.models.assessment import MedicalReport, RiskAssessment, TurnClassification
from app.models.conversation import ConversationState, ExtractedSignal, Role, Utterance
from app.models.symptom import SelectedSymptom
from app.rules.classifier import TurnClassifier
from app.rules.engine import RiskAnalyzer
from app.rules.loader import RulesetLoader
from app.rules.models import IntakeRuleset
from app.services.conversation import ConversationAccumulator
from app.services.report import build_medical_report
from app.services.session_store import SessionStore

logger = logging.getLogger(__name__)


class IntakeEngine:
    """Service turning conversation turns into structured clinical signal.

    Orchestrates:
    1. Per-turn extraction and accumulation (user turns)
    2. Turn classification (assistant turns)
    3. Risk analysis over the accumulated symptom set
    4. Medical report assembly
    """

    def __init__(
        self,
        store: SessionStore,
        ruleset: IntakeRuleset,
        report_disclaimer: str = "",
    ) -> None:
        """Initialize the engine.

        Args:
            store: Session store owned by the caller
            ruleset: Validated ruleset with vocabulary and rules
            report_disclaimer: Disclaimer attached to medical reports
        """
        self.store = store
        self.ruleset = ruleset
        self.report_disclaimer = report_disclaimer
        self.classifier = TurnClassifier(ruleset)
        self.risk_analyzer = RiskAnalyzer(ruleset)

    def accumulator(self, session_id: str) -> ConversationAccumulator:
        return ConversationAccumulator(self.store, session_id, self.ruleset.vocabulary)

    def process_user_turn(self, session_id: str, text: str) -> ExtractedSignal:
        """Extract and accumulate signal from a user utterance.

        The session is created on first use.

        Raises:
            EmptyInputError: If the text is blank
        """
        return self.accumulator(session_id).record_user_turn(text)

    def process_assistant_turn(self, text: str) -> TurnClassification:
        """Classify an assistant utterance.

        Raises:
            EmptyInputError: If the text is blank
        """
        return self.classifier.classify(text)

    def process_turn(
        self, session_id: str, utterance: Utterance
    ) -> ExtractedSignal | TurnClassification:
        """Route an utterance by role.

        User turns are extracted and accumulated into the session; assistant
        turns are classified and never touch session state.

        Raises:
            EmptyInputError: If the text is blank
        """
        if utterance.role is Role.USER:
            return self.process_user_turn(session_id, utterance.text)
        return self.process_assistant_turn(utterance.text)

    def submit_selected_symptoms(
        self,
        session_id: str,
        symptoms: Iterable[SelectedSymptom | dict[str, Any]],
    ) -> ConversationState:
        """Merge catalog-selected symptoms into the session.

        Raises:
            InvalidSymptomError: If any entry is outside the fixed enumerations
        """
        accumulator = self.accumulator(session_id)
        accumulator.record_selected_symptoms(symptoms)
        return accumulator.current_state()

    def get_state(self, session_id: str) -> ConversationState:
        """Snapshot of an existing session.

        Raises:
            UnknownSessionError: If the session was never created or was reset
        """
        self.store.get(session_id)
        return self.accumulator(session_id).current_state()

    def assess_risk(self, session_id: str) -> RiskAssessment:
        """Assess risk from the session's accumulated symptoms.

        Raises:
            EmptyInputError: If the session has no accumulated symptoms
        """
        if not self.store.exists(session_id):
            raise EmptyInputError(f"No symptoms recorded for session {session_id}")

        state = self.accumulator(session_id).current_state()
        assessment = self._assess_state(state)

        audit_logger.log(
            action="risk_assessed",
            session_id=session_id,
            metadata={
                "risk_level": assessment.risk_level.value,
                "rules_fired": assessment.rules_fired,
                "ruleset_version": assessment.ruleset_version,
            },
        )
        return assessment

    def assess_symptom_list(self, symptoms: Iterable[str]) -> RiskAssessment:
        """Assess an explicit symptom list without touching any session.

        Raises:
            EmptyInputError: If the list is empty
        """
        return self.risk_analyzer.assess(symptoms)

    def build_report(self, session_id: str) -> MedicalReport:
        """Build a medical report for the session.

        Raises:
            EmptyInputError: If the session has no accumulated symptoms
        """
        if not self.store.exists(session_id):
            raise EmptyInputError(f"No symptoms recorded for session {session_id}")

        state = self.accumulator(session_id).current_state()
        assessment = self._assess_state(state)

        report = build_medical_report(
            state,
            assessment,
            self.ruleset.vocabulary,
            self.report_disclaimer,
        )
        audit_logger.log(
            action="report_generated",
            session_id=session_id,
            metadata={"record_id": report.record_id},
        )
        return report

    def reset_session(self, session_id: str) -> None:
        """Discard a session and its accumulated state.

        Later reads of the session raise UnknownSessionError until a new
        turn creates it again.

        Raises:
            UnknownSessionError: If the session was never created or was already reset
        """
        self.accumulator(session_id).reset()

    def _assess_state(self, state: ConversationState) -> RiskAssessment:
        # Deterministic join order for the aggregate symptom text
        symptoms = order_symptoms(state.symptoms, self.ruleset.vocabulary)
        return self.risk_analyzer.assess(symptoms)


def create_intake_engine(
    store: SessionStore | None = None,
    settings: Settings | None = None,
) -> IntakeEngine:
    """Build an engine from settings, loading the configured ruleset.

    Args:
        store: Session store to use (a new one if omitted)
        settings: Application settings (cached settings if omitted)

    Returns:
        IntakeEngine
    """
    settings = settings or get_settings()
    loader = RulesetLoader(settings.rulesets_dir)
    ruleset = loader.load(settings.ruleset_filename)

    logger.info(f"Intake engine ready (ruleset {ruleset.id} v{ruleset.version})")

    return IntakeEngine(
        store=store if store is not None else SessionStore(),
        ruleset=ruleset,
        report_disclaimer=settings.report_disclaimer,
    )

"""Tests for the intake engine facade."""

from pathlib import Path

import pytest

from app.core.config import Settings
from app.core.exceptions import EmptyInputError, InvalidSymptomError, UnknownSessionError
from app.models.assessment import RiskLevel, TurnClassification
from app.models.conversation import ExtractedSignal, Role, Utterance
from app.services.intake import IntakeEngine, create_intake_engine
from app.services.session_store import SessionStore


class TestProcessTurns:
    """Tests for user and assistant turn processing."""

    def test_user_turn_creates_session(self, engine: IntakeEngine, store: SessionStore) -> None:
        """Test that sessions are created on first use."""
        signal = engine.process_user_turn("s1", "I have chest pain")

        assert signal.symptoms == {"pain", "chest pain"}
        assert store.exists("s1")

    def test_user_turn_blank_raises(self, engine: IntakeEngine) -> None:
        """Test that a blank user turn raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            engine.process_user_turn("s1", "   ")

    def test_assistant_turn(self, engine: IntakeEngine) -> None:
        """Test assistant turn classification through the facade."""
        assert (
            engine.process_assistant_turn("How long have you had the cough?")
            == TurnClassification.HISTORY_COLLECTION
        )

    def test_assistant_turn_blank_raises(self, engine: IntakeEngine) -> None:
        """Test that a blank assistant turn raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            engine.process_assistant_turn("")

    def test_process_turn_routes_user_utterance(
        self, engine: IntakeEngine, store: SessionStore
    ) -> None:
        """Test that a user utterance is extracted into the session."""
        result = engine.process_turn("s1", Utterance("I have a cough", Role.USER))

        assert isinstance(result, ExtractedSignal)
        assert result.symptoms == {"cough"}
        assert engine.get_state("s1").symptoms == {"cough"}

    def test_process_turn_routes_assistant_utterance(
        self, engine: IntakeEngine, store: SessionStore
    ) -> None:
        """Test that an assistant utterance is classified without creating a session."""
        result = engine.process_turn(
            "s1", Utterance("Please call 911 immediately", "assistant")  # type: ignore[arg-type]
        )

        assert result == TurnClassification.EMERGENCY
        assert len(store) == 0


class TestAssessRisk:
    """Tests for session risk assessment."""

    def test_unknown_session_has_no_symptoms(self, engine: IntakeEngine) -> None:
        """Test that assessing a never-used session is an empty input error."""
        with pytest.raises(EmptyInputError):
            engine.assess_risk("never-used")

    def test_session_without_symptoms_raises(self, engine: IntakeEngine) -> None:
        """Test that a session with only an allergy mention cannot be assessed."""
        engine.process_user_turn("s1", "I'm allergic to penicillin")

        with pytest.raises(EmptyInputError):
            engine.assess_risk("s1")

    def test_accumulated_symptoms_drive_assessment(self, engine: IntakeEngine) -> None:
        """Test that symptoms from several turns are assessed together."""
        engine.process_user_turn("s1", "I have a fever")
        assert engine.assess_risk("s1").risk_level == RiskLevel.LOW

        engine.process_user_turn("s1", "and stomach pain")
        assert engine.assess_risk("s1").risk_level == RiskLevel.MEDIUM

    def test_selected_symptoms_drive_assessment(self, engine: IntakeEngine) -> None:
        """Test that catalog selections alone can be assessed."""
        engine.submit_selected_symptoms(
            "s1",
            [{"id": "chest-pain", "name": "Chest Pain", "category": "pain", "severity": "severe"}],
        )

        result = engine.assess_risk("s1")

        assert result.risk_level == RiskLevel.HIGH
        assert result.red_flags

    def test_explicit_symptom_list(self, engine: IntakeEngine, store: SessionStore) -> None:
        """Test the explicit list path does not create a session."""
        result = engine.assess_symptom_list(["fever", "pain"])

        assert result.risk_level == RiskLevel.MEDIUM
        assert len(store) == 0

    def test_explicit_empty_list_raises(self, engine: IntakeEngine) -> None:
        """Test that an empty explicit list raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            engine.assess_symptom_list([])


class TestSessionLifecycle:
    """Tests for state reads, reset and selected symptom validation."""

    def test_get_state_unknown_raises(self, engine: IntakeEngine) -> None:
        """Test that reading a never-created session raises."""
        with pytest.raises(UnknownSessionError):
            engine.get_state("missing")

    def test_reset_unknown_raises(self, engine: IntakeEngine) -> None:
        """Test that resetting a never-created session raises."""
        with pytest.raises(UnknownSessionError):
            engine.reset_session("missing")

    def test_reset_session_is_unknown_afterwards(self, engine: IntakeEngine) -> None:
        """Test that a reset session cannot be read, reset again or assessed."""
        engine.process_user_turn("s1", "I have a cough and I am taking Benadryl")

        engine.reset_session("s1")

        with pytest.raises(UnknownSessionError):
            engine.get_state("s1")
        with pytest.raises(UnknownSessionError):
            engine.reset_session("s1")
        with pytest.raises(EmptyInputError):
            engine.assess_risk("s1")

    def test_reset_releases_sessions(self, engine: IntakeEngine, store: SessionStore) -> None:
        """Test that the store does not grow across many reset sessions."""
        for i in range(1000):
            engine.process_user_turn(f"s{i}", "I have a cough")
            engine.reset_session(f"s{i}")

        assert len(store) == 0

    def test_session_restarts_empty_after_reset(self, engine: IntakeEngine) -> None:
        """Test that a new turn after reset starts from empty state."""
        engine.process_user_turn("s1", "I have a fever and I am taking Tylenol")
        engine.reset_session("s1")

        engine.process_user_turn("s1", "I feel dizzy")
        state = engine.get_state("s1")

        assert state.symptoms == {"dizzy"}
        assert state.medications == []
        assert state.user_turns == 1

    def test_invalid_selected_symptom(self, engine: IntakeEngine) -> None:
        """Test that an invalid severity raises InvalidSymptomError."""
        with pytest.raises(InvalidSymptomError):
            engine.submit_selected_symptoms(
                "s1",
                [{"id": "x", "name": "X", "category": "pain", "severity": "extreme"}],
            )

    def test_submit_returns_state(self, engine: IntakeEngine) -> None:
        """Test that submitting selections returns the updated state."""
        state = engine.submit_selected_symptoms(
            "s1",
            [{"id": "nausea", "name": "Nausea", "category": "digestive", "severity": "moderate"}],
        )

        assert state.symptoms == {"Nausea (moderate)"}


class TestReport:
    """Tests for report generation through the facade."""

    def test_build_report(self, engine: IntakeEngine) -> None:
        """Test that the report combines state and assessment."""
        engine.process_user_turn("s1", "I have chest pain and I am taking Aspirin")
        engine.process_user_turn("s1", "I am allergic to latex")

        report = engine.build_report("s1")

        assert report.record_id.startswith("MR-")
        assert report.symptoms == ["pain", "chest pain"]
        assert report.medications == ["taking Aspirin"]
        assert report.allergies == ["I am allergic to latex"]
        assert report.analysis.risk_level == RiskLevel.HIGH
        assert report.disclaimer == engine.report_disclaimer

    def test_build_report_without_symptoms_raises(self, engine: IntakeEngine) -> None:
        """Test that a report needs symptoms to assess."""
        with pytest.raises(EmptyInputError):
            engine.build_report("missing")


class TestCreateIntakeEngine:
    """Tests for building an engine from settings."""

    def test_uses_configured_ruleset(self) -> None:
        """Test that the factory loads the configured ruleset."""
        engine = create_intake_engine(settings=Settings(env="test"))

        assert engine.ruleset.id == "clinical-intake"
        assert isinstance(engine.store, SessionStore)

    def test_missing_ruleset_raises(self, tmp_path: Path) -> None:
        """Test that a missing ruleset fails at startup."""
        settings = Settings(env="test", rulesets_dir=tmp_path)

        with pytest.raises(FileNotFoundError):
            create_intake_engine(settings=settings)

    def test_injected_store_is_used(self, store: SessionStore) -> None:
        """Test that the caller-owned store is passed through."""
        engine = create_intake_engine(store=store, settings=Settings(env="test"))

        assert engine.store is store

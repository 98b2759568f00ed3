"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_intake_engine
from app.main import app
from app.rules.loader import RulesetLoader
from app.rules.models import IntakeRuleset, Vocabulary
from app.services.conversation import ConversationAccumulator
from app.services.intake import IntakeEngine
from app.services.session_store import SessionStore

TEST_DISCLAIMER = "Test disclaimer: not medical advice."


@pytest.fixture(scope="session")
def ruleset() -> IntakeRuleset:
    """Load the default ruleset once per test session."""
    return RulesetLoader().load("clinical-intake-v1.0.0.yaml")


@pytest.fixture
def vocabulary(ruleset: IntakeRuleset) -> Vocabulary:
    """Vocabulary tables from the default ruleset."""
    return ruleset.vocabulary


@pytest.fixture
def store() -> SessionStore:
    """Create an empty session store."""
    return SessionStore()


@pytest.fixture
def accumulator(store: SessionStore, vocabulary: Vocabulary) -> ConversationAccumulator:
    """Create an accumulator for a single test session."""
    return ConversationAccumulator(store, "session-1", vocabulary)


@pytest.fixture
def engine(store: SessionStore, ruleset: IntakeRuleset) -> IntakeEngine:
    """Create an engine backed by a fresh store."""
    return IntakeEngine(store=store, ruleset=ruleset, report_disclaimer=TEST_DISCLAIMER)


@pytest.fixture
def client(engine: IntakeEngine) -> Generator[TestClient, None, None]:
    """Create FastAPI test client with the engine dependency overridden."""
    app.dependency_overrides[get_intake_engine] = lambda: engine

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()

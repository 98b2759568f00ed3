"""Business logic services."""

from app.services.conversation import ConversationAccumulator
from app.services.intake import IntakeEngine, create_intake_engine
from app.services.report import build_medical_report
from app.services.session_store import SessionEntry, SessionStore

__all__ = [
    "ConversationAccumulator",
    "IntakeEngine",
    "create_intake_engine",
    "build_medical_report",
    "SessionEntry",
    "SessionStore",
]

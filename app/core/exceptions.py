"""Errors raised by the intake signal engine.

All errors are raised synchronously to the immediate caller. The engine
never retries and holds no global state that a failed call could corrupt.
"""


class IntakeEngineError(Exception):
    """Base class for engine errors."""

    pass


class EmptyInputError(IntakeEngineError):
    """Raised for blank text, or a risk assessment with no symptoms."""

    pass


class InvalidSymptomError(IntakeEngineError):
    """Raised when a selected symptom is outside the fixed enumerations."""

    pass


class UnknownSessionError(IntakeEngineError):
    """Raised when an operation requires a session that does not exist."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Unknown session: {session_id}")


class RulesetError(IntakeEngineError):
    """Raised when a ruleset file is structurally invalid."""

    pass

"""FastAPI dependency injection utilities."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.services.intake import IntakeEngine, create_intake_engine


@lru_cache
def get_intake_engine() -> IntakeEngine:
    """Get the process-wide engine and its session store.

    The API layer owns the store; tests override this dependency with an
    engine backed by a fresh store.
    """
    return create_intake_engine()


Engine = Annotated[IntakeEngine, Depends(get_intake_engine)]

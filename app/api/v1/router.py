"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from app.api.v1 import assessments, health, sessions

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# Conversation sessions
api_router.include_router(
    sessions.router,
    prefix="/sessions",
    tags=["sessions"],
)

# Classification, stateless assessment and symptom catalog
api_router.include_router(
    assessments.router,
    tags=["assessments"],
)

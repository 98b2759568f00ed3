"""Utility functions."""

from app.utils.time import utc_now

__all__ = ["utc_now"]

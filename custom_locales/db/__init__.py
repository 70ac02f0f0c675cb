"""Content database access (language items per database)."""

from .engine import (
    get_engine,
    content_session,
    reset_for_tests,
)

__all__ = [
    "get_engine",
    "content_session",
    "reset_for_tests",
]

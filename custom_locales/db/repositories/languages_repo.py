"""Repository helpers for language items stored in a content database."""
from __future__ import annotations

from typing import List

from sqlalchemy.engine import Engine

from custom_locales.db import content_session
from custom_locales.db.models import LanguageItem
from custom_locales.utils.logging import get_logger

LOG = get_logger("languages_repo")


def _validate_name(name: str) -> str:
    value = (name or "").strip()
    if not value:
        raise ValueError("language_name_required")
    return value


def list_language_names(engine: Engine) -> List[str]:
    """Return language names in insertion order."""
    with content_session(engine) as session:
        rows = session.query(LanguageItem.name).order_by(LanguageItem.id).all()
        return [row[0] for row in rows]


def add_language(engine: Engine, name: str) -> LanguageItem:
    """Create the language item unless one with the same name exists."""
    value = _validate_name(name)
    with content_session(engine) as session:
        record = session.query(LanguageItem).filter(LanguageItem.name == value).one_or_none()
        if record:
            return record
        record = LanguageItem(name=value)
        session.add(record)
        LOG.debug("Language item added name=%s", value)
        return record


__all__ = [
    "list_language_names",
    "add_language",
]

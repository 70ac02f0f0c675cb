"""ORM models for content database language items."""
from __future__ import annotations

import datetime

from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class LanguageItem(Base):
    """A language defined in a content database (e.g. ``en``, ``du-my``)."""

    __tablename__ = "languages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("name", name="uq_languages_name"),)


__all__ = ["Base", "LanguageItem"]

"""Engine & session management for content databases.

One engine per connection URL, created lazily and shared for the process
lifetime. The language schema is created on first use.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session as SASession, sessionmaker

from custom_locales.db.models import Base
from custom_locales.utils.logging import get_logger

_engines: Dict[str, Engine] = {}
_LOCK = threading.Lock()

LOG = get_logger("db")


def _safe_create_schema(engine: Engine) -> None:
    """Run metadata.create_all, tolerating a concurrent creator."""
    try:
        Base.metadata.create_all(engine)
    except OperationalError as e:  # pragma: no cover - concurrency edge
        if "already exists" in str(e).lower():
            LOG.warning("Schema create encountered existing tables (benign race)")
        else:
            raise


def get_engine(url: str) -> Engine:
    engine = _engines.get(url)
    if engine is not None:
        return engine
    with _LOCK:
        engine = _engines.get(url)
        if engine is not None:
            return engine
        LOG.info("Initializing content database engine at %s", url)
        engine = create_engine(url, future=True)
        _safe_create_schema(engine)
        _engines[url] = engine
        return engine


@contextmanager
def content_session(engine: Engine) -> Iterator[SASession]:
    sess = sessionmaker(bind=engine, expire_on_commit=False, class_=SASession)()
    try:
        yield sess
        sess.commit()
    except Exception:
        sess.rollback()
        raise
    finally:
        sess.close()


def reset_for_tests(drop: bool = False) -> None:
    with _LOCK:
        for engine in _engines.values():
            if drop:
                try:
                    Base.metadata.drop_all(engine)
                except Exception:
                    LOG.warning("Failed dropping tables during reset", exc_info=True)
            engine.dispose()
        _engines.clear()


__all__ = [
    "get_engine",
    "content_session",
    "reset_for_tests",
]

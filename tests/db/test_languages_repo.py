"""Tests for languages_repo helpers using SQLite."""
from __future__ import annotations

import pytest

from custom_locales.db import get_engine
from custom_locales.db.repositories import languages_repo


@pytest.fixture
def engine(tmp_path):
    return get_engine(f"sqlite:///{tmp_path / 'content.db'}")


def test_add_language_is_idempotent(engine):
    first = languages_repo.add_language(engine, "du-my")
    second = languages_repo.add_language(engine, " du-my ")

    assert second.id == first.id
    assert languages_repo.list_language_names(engine) == ["du-my"]


def test_list_preserves_insertion_order(engine):
    for name in ("en", "du-my", "da"):
        languages_repo.add_language(engine, name)

    assert languages_repo.list_language_names(engine) == ["en", "du-my", "da"]


def test_add_language_requires_name(engine):
    with pytest.raises(ValueError):
        languages_repo.add_language(engine, "")


def test_engine_is_shared_per_url(engine, tmp_path):
    assert get_engine(f"sqlite:///{tmp_path / 'content.db'}") is engine

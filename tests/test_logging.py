"""Tests for the package logger helper."""
from __future__ import annotations

import logging

from custom_locales.utils.logging import get_logger


def test_module_loggers_are_children_of_package_logger():
    package = get_logger()

    assert package.name == "custom_locales"
    assert get_logger("host.cultures").name == "custom_locales.host.cultures"
    assert get_logger("custom_locales.db").name == "custom_locales.db"
    assert get_logger("host.cultures").parent is get_logger("host")


def test_package_logger_has_single_handler():
    get_logger("db")
    get_logger("startup")
    package = get_logger()

    assert len(package.handlers) == 1
    assert package.propagate is False
    assert get_logger("db").handlers == []


def test_level_follows_environment(monkeypatch):
    monkeypatch.setenv("CUSTOM_LOCALES_LOG_LEVEL", "debug")
    assert get_logger("db").getEffectiveLevel() == logging.DEBUG

    monkeypatch.setenv("CUSTOM_LOCALES_LOG_LEVEL", "warning")
    assert get_logger("db").getEffectiveLevel() == logging.WARNING

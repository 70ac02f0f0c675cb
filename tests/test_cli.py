"""Tests for the operator command line."""
from __future__ import annotations

import json

from custom_locales import cli
from custom_locales.host.runtime import reset_runtime_for_tests
from custom_locales.services import custom_language_manager


def test_seed_requires_connection_string(monkeypatch, capsys):
    monkeypatch.delenv("CUSTOM_LOCALES_CONNECTION_MASTER", raising=False)

    assert cli.main(["seed", "du-my"]) == 2
    assert "No connection string" in capsys.readouterr().err


def test_seed_adds_languages(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("CUSTOM_LOCALES_CONNECTION_MASTER", f"sqlite:///{tmp_path / 'master.db'}")

    assert cli.main(["seed", "--database", "master", "en", "du-my", "en"]) == 0
    assert "master languages: en, du-my" in capsys.readouterr().out


def test_report_prints_json(monkeypatch, make_runtime, region_source, capsys):
    reset_runtime_for_tests(make_runtime())
    monkeypatch.setattr(
        custom_language_manager,
        "resolve_region_names",
        lambda code, source=None: region_source.lookup(code),
    )

    assert cli.main(["report", "--json"]) == 0

    summary = json.loads(capsys.readouterr().out)
    assert summary["patched"]["du-my"]["display_name"] == "Dummy (Malaysia)"


def test_report_exit_code_reflects_errors(make_runtime, region_source, monkeypatch, capsys):
    reset_runtime_for_tests(make_runtime(definitions=("xx",), content_languages=("xx",)))
    monkeypatch.setattr(
        custom_language_manager,
        "resolve_region_names",
        lambda code, source=None: region_source.lookup(code),
    )

    assert cli.main(["report"]) == 1
    assert "xx: ERROR" in capsys.readouterr().out


def test_report_unresolvable_database_is_configuration_problem(make_runtime, capsys):
    reset_runtime_for_tests(make_runtime(role="ContentDelivery", cd_name="web2"))

    assert cli.main(["report"]) == 2
    captured = capsys.readouterr()
    assert "content_database_unresolved" in captured.err
    assert "FATAL" not in captured.err

"""Load the custom language definitions from configuration.

Sources, in order:
- CUSTOM_LOCALES_LANGUAGES (comma separated codes)
- CUSTOM_LOCALES_DEFINITIONS_PATH, a JSON document holding either a list of
  codes or a list of ``{"name": "du-my"}`` objects (optionally wrapped in
  ``{"languages": [...]}``)

Duplicates are dropped case-insensitively while keeping first-seen order.
"""
from __future__ import annotations

import json
from typing import Any, Iterable, List, Tuple

from custom_locales import config as app_config
from custom_locales.errors import DefinitionsLoadError
from custom_locales.models import LanguageDefinition
from custom_locales.utils.logging import get_logger

LOG = get_logger("definitions_service")


def _names_from_document(document: Any) -> List[str]:
    if isinstance(document, dict):
        document = document.get("languages")
    if not isinstance(document, list):
        raise DefinitionsLoadError("definitions_not_a_list")
    names: List[str] = []
    for item in document:
        if isinstance(item, str):
            names.append(item)
        elif isinstance(item, dict) and isinstance(item.get("name"), str):
            names.append(item["name"])
        else:
            raise DefinitionsLoadError(f"invalid_definition_entry: {item!r}")
    return names


def _read_definitions_file(path: str) -> List[str]:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            document = json.load(fh)
    except (OSError, ValueError) as exc:
        raise DefinitionsLoadError(f"definitions_unreadable: {path}") from exc
    return _names_from_document(document)


def build_definitions(names: Iterable[str]) -> Tuple[LanguageDefinition, ...]:
    seen: set[str] = set()
    result: List[LanguageDefinition] = []
    for raw in names:
        name = (raw or "").strip()
        if not name:
            continue
        key = name.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(LanguageDefinition(name=name))
    return tuple(result)


def load_definitions() -> Tuple[LanguageDefinition, ...]:
    """Read the registration set from the environment and definitions file."""
    names = list(app_config.custom_language_codes())
    path = app_config.definitions_path()
    if path:
        names.extend(_read_definitions_file(path))
    definitions = build_definitions(names)
    LOG.debug("Loaded %s custom language definitions", len(definitions))
    return definitions


__all__ = ["load_definitions", "build_definitions"]

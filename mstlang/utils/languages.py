"""Well-known Microsoft Translator language codes and their English names."""

from __future__ import annotations

import json
from pathlib import Path

AUTO_DETECT_CODE = ""

_LANGUAGES: dict[str, str] | None = None


def _load() -> dict[str, str]:
    global _LANGUAGES
    if _LANGUAGES is None:
        path = Path(__file__).parent / "languages.json"
        with open(path, encoding="utf-8") as f:
            _LANGUAGES = json.load(f)
    return _LANGUAGES


def well_known_codes() -> list[str]:
    """Return the codes every registry starts with, auto-detect first."""
    return list(_load())


def list_languages() -> dict[str, str]:
    """Return all bundled language codes and English names."""
    return dict(_load())

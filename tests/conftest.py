"""Shared fixtures: an in-memory backend and registries built on it."""

import pytest

from mstlang.backends.base import ServiceError, TranslationBackend
from mstlang.core.registry import LanguageRegistry, reset_registry


class FakeBackend(TranslationBackend):
    """Backend serving names from a table and recording every call."""

    def __init__(self, names=None, supported=None, fail=False):
        self.names = names or {}
        self.supported = supported or []
        self.fail = fail
        self.name_calls: list[tuple[list[str], str]] = []
        self.supported_calls = 0

    @property
    def name(self) -> str:
        return "fake"

    def fetch_supported_codes(self) -> list[str]:
        self.supported_calls += 1
        if self.fail:
            raise ServiceError("service unavailable")
        return list(self.supported)

    def fetch_localized_names(self, codes: list[str], locale: str) -> list[str]:
        self.name_calls.append((list(codes), locale))
        if self.fail:
            raise ServiceError("service unavailable")
        table = self.names.get(locale, {})
        return [table.get(code, f"{code}@{locale}") for code in codes]


FRENCH_NAMES = {
    "fr": {"en": "Anglais", "fr": "Français"},
    "en": {"en": "English", "fr": "French"},
}


@pytest.fixture
def backend():
    return FakeBackend(names=FRENCH_NAMES)


@pytest.fixture
def registry(backend):
    return LanguageRegistry(backend, seed=["", "en", "fr"])


@pytest.fixture(autouse=True)
def _fresh_default_registry():
    reset_registry()
    yield
    reset_registry()

"""Tests for language interning, lookup and bulk loading."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from mstlang.backends.base import ServiceError
from mstlang.core.registry import LanguageRegistry, get_registry, reset_registry, set_registry
from mstlang.utils.languages import well_known_codes

from conftest import FakeBackend


class TestInterning:
    def test_same_code_same_instance(self, registry):
        assert registry.get_or_create("de") is registry.get_or_create("de")

    def test_equality_by_code(self, registry):
        other = LanguageRegistry(seed=["en"])
        assert registry.get_or_create("en") == other.get_or_create("en")
        assert hash(registry.get_or_create("en")) == hash(other.get_or_create("en"))
        assert registry.get_or_create("en") != registry.get_or_create("fr")

    def test_str_is_code(self, registry):
        lang = registry.get_or_create("zh-CHS")
        assert str(lang) == "zh-CHS"
        assert lang.get_code() == "zh-CHS"
        assert repr(lang) == "Language('zh-CHS')"

    def test_concurrent_get_or_create(self):
        registry = LanguageRegistry(seed=[])
        barrier = threading.Barrier(16)

        def create(_):
            barrier.wait()
            return registry.get_or_create("sw")

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(create, range(16)))

        assert all(r is results[0] for r in results)
        assert len([lang for lang in registry if lang.code == "sw"]) == 1


class TestLookup:
    def test_lookup_known(self, registry):
        assert registry.lookup("en") is registry.get_or_create("en")

    def test_lookup_miss_returns_none(self, registry):
        assert registry.lookup("xx") is None
        assert "xx" not in registry

    def test_lookup_does_not_create(self, registry):
        size = len(registry)
        registry.lookup("xx")
        assert len(registry) == size


class TestSeeding:
    def test_default_seed_has_well_known_codes(self):
        registry = LanguageRegistry()
        for code in ("", "en", "zh-CHS", "zh-CHT", "mww", "vi"):
            assert code in registry
        assert len(registry) == len(well_known_codes()) == 42

    def test_auto_detect_always_present(self):
        registry = LanguageRegistry(seed=["en"])
        assert registry.lookup("") is registry.auto_detect
        assert registry.auto_detect.is_auto_detect

    def test_all_languages_is_snapshot(self, registry):
        snapshot = registry.all_languages()
        registry.get_or_create("de")
        assert [lang.code for lang in snapshot] == ["", "en", "fr"]
        assert [lang.code for lang in registry.all_languages()] == ["", "en", "fr", "de"]


class TestLoadAllAvailableLanguages:
    def test_registers_supported_codes(self):
        backend = FakeBackend(supported=["en", "de", "es"])
        registry = LanguageRegistry(backend, seed=[])
        registry.load_all_available_languages()
        for code in ("en", "de", "es"):
            assert registry.lookup(code) is not None
        assert backend.supported_calls == 1

    def test_keeps_existing_instances(self, registry, backend):
        english = registry.get_or_create("en")
        backend.supported = ["en", "de"]
        registry.load_all_available_languages()
        assert registry.lookup("en") is english

    def test_logs_each_insertion(self, caplog):
        backend = FakeBackend(supported=["en", "de"])
        registry = LanguageRegistry(backend, seed=[])
        with caplog.at_level(logging.INFO, logger="mstlang"):
            registry.load_all_available_languages()
        assert "Inserted language: de" in caplog.text

    def test_service_error_propagates(self):
        registry = LanguageRegistry(FakeBackend(fail=True), seed=[])
        with pytest.raises(ServiceError, match="unavailable"):
            registry.load_all_available_languages()
        assert len(registry) == 1

    def test_without_backend(self):
        registry = LanguageRegistry(seed=[])
        with pytest.raises(ServiceError, match="No translation backend"):
            registry.load_all_available_languages()


class TestDefaultRegistry:
    def test_singleton(self):
        assert get_registry() is get_registry()

    def test_reset(self):
        first = get_registry()
        first.get_or_create("sw")
        reset_registry()
        assert get_registry() is not first
        assert get_registry().lookup("sw") is None

    def test_set_registry(self, registry):
        set_registry(registry)
        assert get_registry() is registry

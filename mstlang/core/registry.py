"""Process-wide intern table of Language values."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator

from mstlang.backends.base import ServiceError, TranslationBackend
from mstlang.core.language import Language
from mstlang.services.name_resolution import NameResolutionService
from mstlang.services.supported_languages import SupportedLanguagesService
from mstlang.utils.languages import AUTO_DETECT_CODE, well_known_codes
from mstlang.utils.logger import get_logger

logger = get_logger(__name__)


class LanguageRegistry:
    """Maps language codes to a single shared :class:`Language` each.

    The registry only grows: codes are never removed, only the cached names
    they carry can be flushed.
    """

    def __init__(
        self,
        backend: TranslationBackend | None = None,
        seed: Iterable[str] | None = None,
    ):
        self._languages: dict[str, Language] = {}
        self._lock = threading.Lock()
        self.backend: TranslationBackend | None = None
        self._names: NameResolutionService | None = None
        self._supported: SupportedLanguagesService | None = None

        codes = well_known_codes() if seed is None else list(seed)
        self.get_or_create(AUTO_DETECT_CODE)
        for code in codes:
            self.get_or_create(code)

        if backend is not None:
            self.use_backend(backend)

    def use_backend(self, backend: TranslationBackend) -> None:
        """Attach the backend used for supported codes and localized names."""
        self.backend = backend
        self._names = NameResolutionService(backend)
        self._supported = SupportedLanguagesService(backend)
        logger.debug("Registry using backend: %s", backend.name)

    def _require_backend(self) -> None:
        if self.backend is None:
            raise ServiceError("No translation backend configured for the language registry")

    def get_or_create(self, code: str) -> Language:
        """Return the interned language for ``code``, creating it if unseen."""
        language = self._languages.get(code)
        if language is not None:
            return language
        with self._lock:
            language = self._languages.get(code)
            if language is None:
                language = Language(code, self)
                self._languages[code] = language
            return language

    def lookup(self, code: str) -> Language | None:
        """Return the language for ``code``, or None if it was never registered."""
        return self._languages.get(code)

    def all_languages(self) -> list[Language]:
        """Snapshot of every registered language in registration order."""
        with self._lock:
            return list(self._languages.values())

    @property
    def auto_detect(self) -> Language:
        return self.get_or_create(AUTO_DETECT_CODE)

    def __contains__(self, code: object) -> bool:
        return code in self._languages

    def __len__(self) -> int:
        return len(self._languages)

    def __iter__(self) -> Iterator[Language]:
        return iter(self.all_languages())

    def load_all_available_languages(self) -> None:
        """Register every code the backend currently supports."""
        self._require_backend()
        codes = self._supported.fetch_supported_codes()
        for code in codes:
            language = self.get_or_create(code)
            logger.info("Inserted language: %s", language)

    def fill_localized_names(self, locale: Language) -> dict[Language, str]:
        """Fetch and cache the name of every registered language in ``locale``.

        One snapshot of the registry is used both to build the request and to
        hand out the response, so names stay aligned with their languages
        even if codes are registered meanwhile. Returns the names that were
        stored.
        """
        self._require_backend()
        targets = [lang for lang in self.all_languages() if not lang.is_auto_detect]
        names = self._names.fetch_localized_names(targets, locale)

        filled: dict[Language, str] = {}
        for lang, name in zip(targets, names):
            lang._store_name(locale, name)
            filled[lang] = name
        logger.debug("Cached %d names for locale %r", len(filled), locale.code)
        return filled

    def flush_name_cache(self) -> None:
        """Forget the cached localized names of every registered language."""
        for lang in self.all_languages():
            lang.flush_cache()

    def values_by_localized_name(self, locale: Language) -> dict[str, Language]:
        """Return all languages keyed by their name in ``locale``, sorted by name.

        The auto-detect language is keyed by its raw code. If two languages
        share a name, the one registered later wins.
        """
        by_name: dict[str, Language] = {}
        for lang in self.all_languages():
            if lang.is_auto_detect:
                by_name[lang.code] = lang
            else:
                by_name[lang.get_name(locale)] = lang
        return dict(sorted(by_name.items()))


_REGISTRY: LanguageRegistry | None = None
_REGISTRY_LOCK = threading.Lock()


def get_registry() -> LanguageRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _REGISTRY
    if _REGISTRY is None:
        with _REGISTRY_LOCK:
            if _REGISTRY is None:
                _REGISTRY = LanguageRegistry()
    return _REGISTRY


def set_registry(registry: LanguageRegistry) -> None:
    """Install ``registry`` as the process-wide registry."""
    global _REGISTRY
    with _REGISTRY_LOCK:
        _REGISTRY = registry


def reset_registry() -> None:
    """Drop the process-wide registry; the next get_registry() builds a fresh one."""
    global _REGISTRY
    with _REGISTRY_LOCK:
        _REGISTRY = None

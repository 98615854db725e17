"""Language values and their localized-name caches."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mstlang.utils.languages import AUTO_DETECT_CODE

if TYPE_CHECKING:
    from mstlang.core.registry import LanguageRegistry

AUTO_DETECT_NAME = "Auto Detect"


class Language:
    """A language code known to the translation service.

    Instances are interned by :class:`~mstlang.core.registry.LanguageRegistry`;
    obtain them with ``registry.get_or_create(code)`` rather than calling the
    constructor. Two languages are equal when their codes are equal.

    Each language caches its display name per locale, where a locale is just
    another ``Language``. The cache is a plain dict: single get/set/clear
    operations on it are atomic, and a flush racing a fill may lose to the
    fill.
    """

    __slots__ = ("_code", "_registry", "_localized_names")

    def __init__(self, code: str, registry: LanguageRegistry):
        self._code = code
        self._registry = registry
        self._localized_names: dict[Language, str] = {}

    @property
    def code(self) -> str:
        return self._code

    def get_code(self) -> str:
        return self._code

    @property
    def is_auto_detect(self) -> bool:
        return self._code == AUTO_DETECT_CODE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Language):
            return NotImplemented
        return self._code == other._code

    def __hash__(self) -> int:
        return hash(self._code)

    def __str__(self) -> str:
        return self._code

    def __repr__(self) -> str:
        return f"Language({self._code!r})"

    def get_name(self, locale: Language) -> str:
        """Return the name of this language in the tongue of ``locale``.

        On a cache miss the names of every registered language are fetched
        for ``locale`` in a single backend call, on the assumption that the
        caller will want another name in the same locale soon.

        Raises:
            ServiceError: the backend call failed or no backend is attached.
        """
        name = self._localized_names.get(locale)
        if name is not None:
            return name

        # Not cached, so every call re-checks this branch.
        if self.is_auto_detect or locale.is_auto_detect:
            return AUTO_DETECT_NAME

        filled = self._registry.fill_localized_names(locale)
        return filled[self]

    def cached_locales(self) -> list[Language]:
        return list(self._localized_names)

    def _store_name(self, locale: Language, name: str) -> None:
        self._localized_names[locale] = name

    def flush_cache(self) -> None:
        """Forget every cached localized name of this language."""
        self._localized_names.clear()

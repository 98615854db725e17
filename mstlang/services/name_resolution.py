"""Bulk retrieval of localized language names."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mstlang.backends.base import ServiceError, TranslationBackend
from mstlang.utils.logger import get_logger

if TYPE_CHECKING:
    from mstlang.core.language import Language

logger = get_logger(__name__)


class NameResolutionService:
    """Fetches the display names of many languages in one backend call."""

    def __init__(self, backend: TranslationBackend):
        self.backend = backend

    def fetch_localized_names(
        self,
        targets: list[Language],
        locale: Language,
    ) -> list[str]:
        """Return the names of ``targets`` in the tongue of ``locale``.

        The result is aligned with ``targets``. An auto-detect locale has no
        tongue, so nothing is fetched for it and the result is empty.
        """
        if locale.is_auto_detect:
            return []

        codes = [lang.code for lang in targets]
        logger.debug(
            "Fetching %d localized names for locale %r via %s",
            len(codes), locale.code, self.backend.name,
        )
        names = self.backend.fetch_localized_names(codes, locale.code)
        if len(names) != len(codes):
            raise ServiceError(
                f"Expected {len(codes)} localized names for locale "
                f"{locale.code!r}, got {len(names)}"
            )
        return list(names)

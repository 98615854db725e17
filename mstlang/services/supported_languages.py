"""Retrieval of the language codes the service can translate."""

from __future__ import annotations

from mstlang.backends.base import TranslationBackend
from mstlang.utils.logger import get_logger

logger = get_logger(__name__)


class SupportedLanguagesService:
    def __init__(self, backend: TranslationBackend):
        self.backend = backend

    def fetch_supported_codes(self) -> list[str]:
        codes = list(self.backend.fetch_supported_codes())
        logger.debug("%s supports %d language codes", self.backend.name, len(codes))
        return codes

"""Abstract translation backend and the helpers shared by its implementations."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from mstlang.utils.logger import get_logger

logger = get_logger(__name__)

UTF8_BOM = "\ufeff"


class ServiceError(Exception):
    """The remote translation service could not be used.

    Raised for network failures, rejected credentials and responses that do
    not have the expected shape.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def build_string_array_param(codes: list[str]) -> str:
    """Encode codes the way the AJAX interface expects array parameters."""
    return json.dumps(list(codes), ensure_ascii=False, separators=(",", ":"))


def parse_string_array(text: str) -> list[str]:
    """Parse a JSON string array returned by the service.

    The service prefixes some responses with a byte order mark, and reports
    failures as a bare JSON string (e.g. "ArgumentException: ...") with a
    200 status, so both cases are handled here.
    """
    text = text.lstrip(UTF8_BOM).strip()
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise ServiceError(f"Could not parse response as JSON: {text[:200]}") from e

    if isinstance(data, str):
        raise ServiceError(f"Service returned an error: {data}")
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise ServiceError(f"Expected a JSON array of strings, got: {text[:200]}")
    return data


class TranslationBackend(ABC):
    """Remote capabilities the language registry relies on."""

    @abstractmethod
    def fetch_supported_codes(self) -> list[str]:
        """Return the codes the service can currently translate."""

    @abstractmethod
    def fetch_localized_names(self, codes: list[str], locale: str) -> list[str]:
        """Return the display names of ``codes`` in the tongue of ``locale``.

        The result is positionally aligned with ``codes``.
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name for display."""

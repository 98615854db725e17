"""Microsoft Translator V2 AJAX interface backend."""

from __future__ import annotations

import time
from typing import Any

import httpx

from mstlang.backends.base import (
    ServiceError,
    TranslationBackend,
    build_string_array_param,
    parse_string_array,
)
from mstlang.utils.languages import AUTO_DETECT_CODE
from mstlang.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "http://api.microsofttranslator.com/V2/Ajax.svc"
DEFAULT_TOKEN_URL = "https://datamarket.accesscontrol.windows.net/v2/OAuth2-13"
TOKEN_SCOPE = "http://api.microsofttranslator.com"
TOKEN_REFRESH_MARGIN = 10  # seconds before expiry to fetch a new token


class MicrosoftTranslatorBackend(TranslationBackend):
    """Calls GetLanguagesForTranslate and GetLanguageNames.

    Authenticates with either a legacy application key, sent as ``appId``,
    or a client id/secret pair exchanged for a bearer token.
    """

    def __init__(
        self,
        api_key: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        base_url: str | None = None,
        token_url: str | None = None,
        timeout: float = 15.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.token_url = token_url or DEFAULT_TOKEN_URL
        self.timeout = timeout
        self._transport = transport
        self._token: str | None = None
        self._token_expires: float = 0

    @property
    def name(self) -> str:
        return "microsoft"

    def validate_service_state(self) -> None:
        """Fail early when no usable credentials have been configured."""
        if self.api_key:
            return
        if self.client_id and self.client_secret:
            return
        raise ServiceError(
            "No credentials configured. Set an API key, or a client id and client secret."
        )

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, transport=self._transport)

    def _ensure_token(self) -> None:
        """Exchange the client credentials for a bearer token and cache it."""
        if self._token and time.time() < self._token_expires:
            return
        logger.debug("POST %s client_id=%s", self.token_url, self.client_id)
        try:
            with self._client() as client:
                resp = client.post(
                    self.token_url,
                    data={
                        "grant_type": "client_credentials",
                        "scope": TOKEN_SCOPE,
                        "client_id": self.client_id,
                        "client_secret": self.client_secret,
                    },
                )
                resp.raise_for_status()
            data = resp.json()
            token = data["access_token"]
            expires_in = int(data.get("expires_in", 600))
        except httpx.HTTPStatusError as e:
            raise ServiceError(
                f"Authentication failed: HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ServiceError(f"Authentication request failed: {e}") from e
        except (ValueError, KeyError, TypeError) as e:
            raise ServiceError(f"Malformed token response: {e}") from e

        self._token = token
        self._token_expires = time.time() + max(expires_in - TOKEN_REFRESH_MARGIN, 0)
        logger.debug("Access token acquired, expires in %ds", expires_in)

    def _get(self, method: str, params: dict[str, Any] | None = None) -> list[str]:
        """Authenticated GET against an AJAX method returning a string array."""
        self.validate_service_state()

        headers: dict[str, str] = {}
        query: dict[str, Any] = {}
        if self.api_key:
            query["appId"] = self.api_key
        else:
            self._ensure_token()
            query["appId"] = ""
            headers["Authorization"] = f"Bearer {self._token}"
        if params:
            query.update(params)

        url = f"{self.base_url}/{method}"
        logger.debug("GET %s", url)
        try:
            with self._client() as client:
                resp = client.get(url, params=query, headers=headers)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ServiceError(
                f"{method} failed: HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ServiceError(f"{method} request failed: {e}") from e

        return parse_string_array(resp.text)

    def fetch_supported_codes(self) -> list[str]:
        return self._get("GetLanguagesForTranslate")

    def fetch_localized_names(self, codes: list[str], locale: str) -> list[str]:
        if locale == AUTO_DETECT_CODE:
            return []
        return self._get(
            "GetLanguageNames",
            params={
                "locale": locale,
                "languageCodes": build_string_array_param(codes),
            },
        )

"""Build configured backends and registries."""

from __future__ import annotations

from typing import Any

from mstlang.backends.base import TranslationBackend
from mstlang.backends.microsoft import MicrosoftTranslatorBackend
from mstlang.core.registry import LanguageRegistry, get_registry
from mstlang.utils.logger import get_logger

logger = get_logger(__name__)

BACKENDS: dict[str, type[TranslationBackend]] = {
    "microsoft": MicrosoftTranslatorBackend,
}


def get_backend(config: dict[str, Any]) -> TranslationBackend:
    backend_name = config.get("backend", "microsoft")
    backend_cls = BACKENDS.get(backend_name)
    if backend_cls is None:
        raise ValueError(
            f"Unknown backend: {backend_name}. "
            f"Available: {', '.join(BACKENDS)}"
        )
    kwargs: dict[str, Any] = {
        "api_key": config.get("api_key"),
        "client_id": config.get("client_id"),
        "client_secret": config.get("client_secret"),
        "base_url": config.get("base_url"),
    }
    if config.get("timeout") is not None:
        kwargs["timeout"] = float(config["timeout"])
    return backend_cls(**kwargs)


def configure_registry(
    config: dict[str, Any],
    registry: LanguageRegistry | None = None,
    load: bool = False,
) -> LanguageRegistry:
    """Attach a backend built from ``config`` to a registry.

    Uses the process-wide registry unless one is given. With ``load`` the
    registry is also expanded to every code the service supports.

    Raises:
        ServiceError: loading the supported codes failed.
    """
    registry = registry if registry is not None else get_registry()
    backend = get_backend(config)
    registry.use_backend(backend)
    logger.debug("Using backend: %s", backend.name)
    if load:
        registry.load_all_available_languages()
        logger.debug("Registry holds %d languages", len(registry))
    return registry

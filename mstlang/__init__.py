"""Language codes and localized language names for Microsoft Translator."""

from mstlang.backends.base import ServiceError, TranslationBackend
from mstlang.backends.microsoft import MicrosoftTranslatorBackend
from mstlang.core.language import AUTO_DETECT_NAME, Language
from mstlang.core.registry import LanguageRegistry, get_registry, reset_registry, set_registry

__version__ = "0.1.0"

__all__ = [
    "AUTO_DETECT_NAME",
    "Language",
    "LanguageRegistry",
    "MicrosoftTranslatorBackend",
    "ServiceError",
    "TranslationBackend",
    "__version__",
    "get_registry",
    "reset_registry",
    "set_registry",
]

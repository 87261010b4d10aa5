"""interlocale: locale-keyed string lookup with same-language fallback.

Translations are stored per language and region. A lookup for a region
that has no table falls back to the other regions of the language, and a
lookup for an unknown language returns the key itself.
"""

from interlocale.context import LanguageGroup, TranslationContext, TranslationTable
from interlocale.core.exceptions import (
    ContextNotInitializedError,
    InterlocaleError,
    LocaleParseError,
)
from interlocale.locale import LocaleId, parse_locale

__all__ = [
    "ContextNotInitializedError",
    "InterlocaleError",
    "LanguageGroup",
    "LocaleId",
    "LocaleParseError",
    "TranslationContext",
    "TranslationTable",
    "parse_locale",
]

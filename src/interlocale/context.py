"""Translation context: the language -> region -> key string store.

Lookups never fail on missing data. A missing region falls back to any
other region of the same language, and a missing language returns the
key unchanged. Only malformed locale strings raise.

Not thread-safe. Callers sharing a context across threads must
synchronize add_locale and set_preferred_locale themselves.
"""

import os
from collections.abc import Mapping

from interlocale.core.config import get_settings
from interlocale.core.exceptions import ContextNotInitializedError, LocaleParseError
from interlocale.core.logging import get_logger
from interlocale.locale import LocaleId, parse_locale

logger = get_logger(__name__)

# key -> translated text for one (language, region)
TranslationTable = dict[str, str]
# region -> table for one language
LanguageGroup = dict[str, TranslationTable]


def _first_match(group: LanguageGroup, key: str) -> str | None:
    """Return the first non-empty translation of key in any table of group."""
    for table in group.values():
        text = table.get(key)
        if text:
            return text
    return None


class TranslationContext:
    """In-memory translation store with a preferred-locale shortcut.

    Usage:
        ctx = TranslationContext()
        ctx.init()
        ctx.add_locale("pt_BR", {"hello": "olá"})
        ctx.get_from_locale("hello", "pt_PT")  # "olá", same language
        ctx.get_from_locale("hello", "en_US")  # "hello", no such language

        ctx.set_preferred_locale("pt_BR")
        ctx.get("hello")  # "olá"
    """

    def __init__(self) -> None:
        self._languages: dict[str, LanguageGroup] | None = None
        self._preferred_locale: LocaleId | None = None
        self._preferred_lang: LanguageGroup | None = None
        self._preferred: TranslationTable | None = None

    @classmethod
    def create(cls) -> "TranslationContext":
        """Construct an already initialized context."""
        ctx = cls()
        ctx.init()
        return ctx

    def init(self) -> None:
        """Allocate the empty language map.

        Must be called before any other operation. Calling it again drops
        every registered locale and the preferred locale.
        """
        self._languages = {}
        self._clear_preferred()
        logger.debug("context_initialized")

    def _require_languages(self, operation: str) -> dict[str, LanguageGroup]:
        if self._languages is None:
            raise ContextNotInitializedError(operation)
        return self._languages

    def _clear_preferred(self) -> None:
        self._preferred_locale = None
        self._preferred_lang = None
        self._preferred = None

    @property
    def preferred_locale(self) -> LocaleId | None:
        """The preferred locale, or None when no preference is in effect."""
        return self._preferred_locale

    def add_locale(self, locale: str, entries: Mapping[str, str]) -> None:
        """Register the translations for one locale.

        An existing table for the same language and region is replaced as
        a whole; keys are not merged.

        Raises:
            LocaleParseError: If the locale string is malformed. Nothing
                is registered in that case.
        """
        languages = self._require_languages("add_locale")
        lang, region = parse_locale(locale)

        table: TranslationTable = dict(entries)
        group = languages.get(lang)
        if group is None:
            languages[lang] = {region: table}
        else:
            group[region] = table

        # Keep the cached preferred table pointing at the slot it names
        if self._preferred_locale == (lang, region) and self._preferred_lang is not None:
            self._preferred = table

        logger.debug("locale_added", language=lang, region=region, entries=len(table))

    def set_preferred_locale(self, locale: str) -> None:
        """Set the locale used by get().

        If no translations exist for the language, the preference is
        cleared and get() returns keys unchanged. If the language exists
        but the region does not, get() searches every region of the
        language.

        Raises:
            LocaleParseError: If the locale string is malformed. The
                current preference is left untouched.
        """
        languages = self._require_languages("set_preferred_locale")
        parsed = parse_locale(locale)

        group = languages.get(parsed.language)
        if group is None:
            self._clear_preferred()
            logger.debug("preferred_locale_cleared", locale=str(parsed))
            return

        self._preferred_locale = parsed
        self._preferred_lang = group
        self._preferred = group.get(parsed.region)
        logger.debug(
            "preferred_locale_set",
            locale=str(parsed),
            exact_region=self._preferred is not None,
        )

    def auto_set_preferred_locale(self) -> None:
        """Set the preferred locale from the environment.

        Tries each variable of settings.LOCALE_ENV_VARS in order (LC_ALL,
        then LANG by default). An unset variable counts as unparsable.

        Raises:
            LocaleParseError: If the last variable cannot be parsed either.
        """
        *candidates, last = get_settings().LOCALE_ENV_VARS
        for name in candidates:
            value = os.environ.get(name, "")
            try:
                self.set_preferred_locale(value)
            except LocaleParseError:
                logger.debug("auto_locale_fallback", variable=name, value=value)
                continue
            return
        self.set_preferred_locale(os.environ.get(last, ""))

    def get(self, text: str) -> str:
        """Translate text using the preferred locale.

        Returns text unchanged when there is no preferred language or no
        non-empty translation in any of its regions.
        """
        if self._preferred_lang is None:
            return text
        if self._preferred is not None:
            local_text = self._preferred.get(text)
            if local_text:
                return local_text
        return _first_match(self._preferred_lang, text) or text

    def get_from_locale(self, text: str, locale: str) -> str:
        """Translate text into a specific locale.

        When the exact region is registered, only that table is consulted.
        When it is not, every region of the language is searched. An
        unknown language returns text unchanged.

        Raises:
            LocaleParseError: If the locale string is malformed.
        """
        languages = self._require_languages("get_from_locale")
        lang, region = parse_locale(locale)

        group = languages.get(lang)
        if group is None:
            return text

        table = group.get(region)
        if table is None:
            return _first_match(group, text) or text

        return table.get(text) or text

    def has_locale(self, locale: str) -> bool:
        """Check whether translations exist for the exact language and region."""
        languages = self._require_languages("has_locale")
        lang, region = parse_locale(locale)
        return region in languages.get(lang, {})

    def locales(self) -> list[LocaleId]:
        """List every registered locale, sorted."""
        languages = self._require_languages("locales")
        return sorted(
            LocaleId(lang, region)
            for lang, group in languages.items()
            for region in group
        )

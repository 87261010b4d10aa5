"""Locale identifiers and the locale string parser.

Locale strings take the form `language_REGION`, optionally followed by an
encoding or modifier (`pt_BR.UTF-8`, `de_DE@euro`), which is ignored.
"""

import re
from typing import NamedTuple

from interlocale.core.exceptions import LocaleParseError

# Two non-blank characters, an underscore, two non-blank characters
_LOCALE_PATTERN = re.compile(r"(\S{2})_(\S{2})")


class LocaleId(NamedTuple):
    """A (language, region) pair, e.g. ("pt", "BR")."""

    language: str
    region: str

    def __str__(self) -> str:
        return f"{self.language}_{self.region}"


def parse_locale(locale: str) -> LocaleId:
    """Split a locale string into its language and region codes.

    Handles cases like:
    - "pt_BR" -> LocaleId("pt", "BR")
    - "en_US.UTF-8" -> LocaleId("en", "US")

    Case is kept as given; codes are not checked against any registry.

    Raises:
        LocaleParseError: If the string does not start with two
            two-character segments joined by an underscore.
    """
    match = _LOCALE_PATTERN.match(locale) if locale else None
    if match is None:
        raise LocaleParseError(locale)
    return LocaleId(match.group(1), match.group(2))

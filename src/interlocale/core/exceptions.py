"""Exception hierarchy for interlocale.

All custom exceptions inherit from InterlocaleError, which provides:
- A human-readable message
- A machine-readable error code (e.g., "LOCALE_PARSE_ERROR")
- An optional details dict for additional context

Lookups that find nothing are not errors: they return the key unchanged.
Only malformed locale strings and misuse of an uninitialized context raise.
"""

from typing import Any


class InterlocaleError(Exception):
    """Base exception for all interlocale errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dict for JSON serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class LocaleParseError(InterlocaleError, ValueError):
    """A locale string could not be split into language and region."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(
            f"unparsable locale string {locale!r}",
            "LOCALE_PARSE_ERROR",
            {"locale": locale},
        )


class ContextNotInitializedError(InterlocaleError, RuntimeError):
    """TranslationContext.init() was not called before use."""

    def __init__(self, operation: str):
        super().__init__(
            f"TranslationContext.{operation}() called before init()",
            "CONTEXT_NOT_INITIALIZED",
            {"operation": operation},
        )

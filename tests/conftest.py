import logging

import pytest
import structlog

from interlocale import TranslationContext
from interlocale.core.config import get_settings
from interlocale.core.logging import LIBRARY_LOGGER


@pytest.fixture
def ctx() -> TranslationContext:
    """Context with a single Brazilian Portuguese table."""
    context = TranslationContext()
    context.init()
    context.add_locale("pt_BR.UTF-8", {"hello": "olá"})
    return context


@pytest.fixture
def clean_locale_env(monkeypatch):
    monkeypatch.delenv("LC_ALL", raising=False)
    monkeypatch.delenv("LANG", raising=False)
    monkeypatch.delenv("INTERLOCALE_LOCALE_ENV_VARS", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults and the interlocale logger after a test."""
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    handlers = list(library_logger.handlers)
    level = library_logger.level
    propagate = library_logger.propagate
    yield library_logger
    structlog.reset_defaults()
    library_logger.handlers = handlers
    library_logger.setLevel(level)
    library_logger.propagate = propagate

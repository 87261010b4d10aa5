"""Tests for interlocale.locale parsing."""

import pytest

from interlocale import LocaleId, LocaleParseError, parse_locale


class TestParseLocale:
    """Tests for parse_locale()."""

    @pytest.mark.parametrize(
        ("locale", "expected"),
        [
            ("pt_BR", LocaleId("pt", "BR")),
            ("en_US", LocaleId("en", "US")),
            ("eo_IN", LocaleId("eo", "IN")),
            ("12_34", LocaleId("12", "34")),
        ],
    )
    def test_language_region(self, locale, expected):
        assert parse_locale(locale) == expected

    @pytest.mark.parametrize("suffix", [".UTF-8", ".ISO-8859-1", ".utf8", "@euro"])
    def test_suffix_is_ignored(self, suffix):
        assert parse_locale(f"pt_BR{suffix}") == LocaleId("pt", "BR")

    def test_case_is_preserved(self):
        assert parse_locale("PT_br") == LocaleId("PT", "br")

    @pytest.mark.parametrize(
        "locale",
        ["", "C", "POSIX", "pt", "pt_", "pt_B", "ptBR", "pt-BR", "p_BR", "pt_ BR", " pt_BR", "C.UTF-8"],
    )
    def test_malformed_raises(self, locale):
        with pytest.raises(LocaleParseError):
            parse_locale(locale)

    def test_error_echoes_input(self):
        with pytest.raises(LocaleParseError) as exc_info:
            parse_locale("pt-BR")
        assert exc_info.value.locale == "pt-BR"
        assert "pt-BR" in str(exc_info.value)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_locale("nope")


class TestLocaleId:
    """Tests for the LocaleId value type."""

    def test_fields(self):
        loc = LocaleId("pt", "BR")
        assert loc.language == "pt"
        assert loc.region == "BR"

    def test_str(self):
        assert str(LocaleId("pt", "BR")) == "pt_BR"

    def test_str_round_trips_through_parser(self):
        loc = LocaleId("en", "GB")
        assert parse_locale(str(loc)) == loc

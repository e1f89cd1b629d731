"""Tests for locale resolution."""

import pytest

from article_importer.jats import LocaleResolver, iso1_from_locale


class TestLocaleResolver:
    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("en", "en"),
            ("EN", "en"),
            ("pt-BR", "pt_BR"),
            ("pt_br", "pt_BR"),
            ("zh-Hant-TW", "zh_TW"),
            ("es-419", "es_419"),
        ],
    )
    def test_normalizes_tags(self, tag, expected):
        assert LocaleResolver("en").resolve(tag) == expected

    @pytest.mark.parametrize("tag", [None, "", "   "])
    def test_absent_tag_uses_default(self, tag):
        assert LocaleResolver("fr_CA").resolve(tag) == "fr_CA"

    def test_locale_map_overrides(self):
        """Mapped tags win, matched case-insensitively on raw or normalized form."""
        resolver = LocaleResolver("en_US", {"en": "en_US", "pt-BR": "pt_BR_custom"})

        assert resolver("en") == "en_US"
        assert resolver("EN") == "en_US"
        assert resolver("pt_br") == "pt_BR_custom"
        assert resolver("de") == "de"

    def test_callable(self):
        assert LocaleResolver("en")("fr") == "fr"


class TestIso1FromLocale:
    def test_strips_region(self):
        assert iso1_from_locale("pt_BR") == "pt"

    def test_plain_language(self):
        assert iso1_from_locale("en") == "en"

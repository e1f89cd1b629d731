"""Locale resolution for xml:lang attributes."""

import logging
import re

logger = logging.getLogger(__name__)

_SUBTAG_SPLIT = re.compile(r"[-_]")


class LocaleResolver:
    """Map BCP 47 style language tags to locale codes.

    Tags are normalized to ``language[_REGION]`` ("pt-br" -> "pt_BR",
    "EN" -> "en"). Script and variant subtags are dropped. Entries in
    ``locale_map`` take precedence and are matched case-insensitively
    against both the raw and the normalized tag. An absent or blank tag
    resolves to the default locale.

    Example:
        resolver = LocaleResolver("en_US", {"en": "en_US"})
        resolver("en")      # 'en_US'
        resolver("fr-CA")   # 'fr_CA'
        resolver(None)      # 'en_US'
    """

    def __init__(self, default_locale: str = "en", locale_map: dict[str, str] | None = None):
        self.default_locale = default_locale
        self._locale_map = {
            key.lower().replace("-", "_"): value
            for key, value in (locale_map or {}).items()
        }

    def __call__(self, language_tag: str | None = None) -> str:
        return self.resolve(language_tag)

    def resolve(self, language_tag: str | None = None) -> str:
        """Resolve a language tag, falling back to the default locale."""
        if language_tag is None or not language_tag.strip():
            return self.default_locale

        tag = language_tag.strip()
        mapped = self._locale_map.get(tag.lower().replace("-", "_"))
        if mapped:
            return mapped

        locale = self.normalize(tag)
        mapped = self._locale_map.get(locale.lower())
        if mapped:
            return mapped
        if not locale:
            logger.debug(f"Unusable language tag {language_tag!r}, using default locale")
            return self.default_locale
        return locale

    @staticmethod
    def normalize(language_tag: str) -> str:
        """Normalize a tag to ``language[_REGION]`` without consulting the map."""
        subtags = [part for part in _SUBTAG_SPLIT.split(language_tag.strip()) if part]
        if not subtags:
            return ""
        language = subtags[0].lower()
        for subtag in subtags[1:]:
            if len(subtag) == 2 and subtag.isalpha():
                return f"{language}_{subtag.upper()}"
            if len(subtag) == 3 and subtag.isdigit():
                return f"{language}_{subtag}"
        return language


def iso1_from_locale(locale: str) -> str:
    """Return the language part of a locale code ("pt_BR" -> "pt")."""
    return _SUBTAG_SPLIT.split(locale, maxsplit=1)[0].lower()

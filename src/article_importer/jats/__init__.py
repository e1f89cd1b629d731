"""JATS document access, locale resolution and markup rendering."""

from .document import XML_LANG, JatsDocument, text_of
from .locale import LocaleResolver, iso1_from_locale
from .markup import INLINE_TAGS, render_text_content, sanitize

__all__ = [
    "INLINE_TAGS",
    "XML_LANG",
    "JatsDocument",
    "LocaleResolver",
    "iso1_from_locale",
    "render_text_content",
    "sanitize",
    "text_of",
]

"""Base class for front-matter parsers.

Each parser extracts one group of publication fields from the JATS
<front>/<article-meta> block. Parsers are independent of each other and of
persistence: they receive the document and the locale resolver explicitly
and return plain values.
"""

from abc import ABC, abstractmethod
from typing import Any

from article_importer.jats import JatsDocument, LocaleResolver

ARTICLE_META = "front/article-meta"


class FrontMatterParser(ABC):
    """Abstract base class for parsers over <article-meta>."""

    def __init__(self, document: JatsDocument, locale_resolver: LocaleResolver):
        self.document = document
        self.locale_resolver = locale_resolver

    def locale_of(self, node) -> str:
        """Resolve the locale of a node from its xml:lang attribute."""
        return self.locale_resolver(self.document.lang_of(node))

    @abstractmethod
    def parse(self) -> Any:
        """Extract this parser's fields from the document."""
        pass

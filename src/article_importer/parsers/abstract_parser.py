"""Abstract extraction."""

import logging

from article_importer.jats import sanitize

from .parser import ARTICLE_META, FrontMatterParser

logger = logging.getLogger(__name__)


class AbstractParser(FrontMatterParser):
    """Read <abstract> and <trans-abstract> as sanitized HTML per locale.

    Only italic, sub, sup and p markup survives (italic becomes em). Nodes
    without xml:lang fall under the default locale. When two abstracts share
    a locale the later one in document order wins.
    """

    def parse(self) -> dict[str, str]:
        abstracts: dict[str, str] = {}
        for node in self.document.select(f"{ARTICLE_META}/abstract|{ARTICLE_META}/trans-abstract"):
            value = sanitize(node)
            if value:
                abstracts[self.locale_of(node)] = value
        logger.debug(f"Found abstracts for locales {sorted(abstracts)}")
        return abstracts

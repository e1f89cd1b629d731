"""Title, subtitle and publication locale extraction."""

import logging
from dataclasses import dataclass, field

from article_importer.exceptions import MissingTitleError

from .parser import ARTICLE_META, FrontMatterParser

logger = logging.getLogger(__name__)

TITLE_GROUP = f"{ARTICLE_META}/title-group"


@dataclass
class TitleSet:
    """Localized titles of an article.

    Attributes:
        title: Title keyed by locale
        subtitle: Subtitle keyed by locale
        locale: Locale of the first non-empty title, in the order primary
            title then translated titles
    """

    title: dict[str, str] = field(default_factory=dict)
    subtitle: dict[str, str] = field(default_factory=dict)
    locale: str | None = None


class TitleParser(FrontMatterParser):
    """Read <article-title>, <subtitle> and every <trans-title-group>.

    The publication locale is taken from the first node that actually holds
    title text. It is set once and never overwritten, so later translated
    titles cannot change it.
    """

    def parse(self) -> TitleSet:
        """Extract the titles.

        Returns:
            TitleSet with at least one non-empty title

        Raises:
            MissingTitleError: If no title node yields any text
        """
        titles = TitleSet()
        has_title = False

        node = self.document.select_first(f"{TITLE_GROUP}/article-title")
        if node is not None:
            locale = self.locale_of(node)
            value = self.document.select_text(".", node)
            if value:
                has_title = True
                titles.locale = locale
            titles.title[locale] = value

        node = self.document.select_first(f"{TITLE_GROUP}/subtitle")
        if node is not None:
            titles.subtitle[self.locale_of(node)] = self.document.select_text(".", node)

        for node in self.document.select(f"{TITLE_GROUP}/trans-title-group"):
            locale = self.locale_of(node)
            value = self.document.select_text("trans-title", node)
            if value:
                if titles.locale is None:
                    titles.locale = locale
                has_title = True
                titles.title[locale] = value
            value = self.document.select_text("trans-subtitle", node)
            if value:
                titles.subtitle[locale] = value

        if not has_title:
            raise MissingTitleError(document_id=self.document.document_id)

        logger.debug(f"Resolved titles for locales {sorted(titles.title)}, locale {titles.locale}")
        return titles

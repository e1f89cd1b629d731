"""Publication date resolution."""

import logging
from datetime import date, datetime, timezone

from lxml import etree

from article_importer.exceptions import MissingPublicationDateError

from .parser import ARTICLE_META, FrontMatterParser

logger = logging.getLogger(__name__)

ONLINE_PUB_TYPE = "given-online-pub"
ELECTRONIC_FORMAT = "electronic"


def is_online_pub_date(node: etree._Element) -> bool:
    """True for pub-dates that mark the online/electronic publication."""
    return (
        node.get("pub-type") == ONLINE_PUB_TYPE
        or node.get("publication-format") == ELECTRONIC_FORMAT
    )


def to_datetime(value: date | datetime) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Format an aware datetime as RFC 3339 with a numeric offset."""
    return to_datetime(value).isoformat(timespec="seconds")


class PublicationDateParser(FrontMatterParser):
    """Pick and parse the article's <pub-date>.

    The first online/electronic pub-date wins. When there is none, the last
    pub-date in document order is used instead.
    """

    def select_node(self) -> etree._Element | None:
        """Return the pub-date node to parse, or None if there is none."""
        node = None
        for node in self.document.select(f"{ARTICLE_META}/pub-date"):
            if is_online_pub_date(node):
                break
        return node

    def parse(self) -> datetime:
        """Resolve the document's publication date.

        Raises:
            MissingPublicationDateError: If there is no pub-date or it
                cannot be parsed
        """
        node = self.select_node()
        publication_date = self.document.get_date_from_node(node)
        if publication_date is None:
            raise MissingPublicationDateError(
                "Publication date is missing from the document",
                document_id=self.document.document_id,
            )
        return publication_date

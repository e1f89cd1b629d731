"""JATS document wrapper.

Thin layer over an lxml element tree giving the parsers path selection,
text extraction, attribute access and pub-date parsing. Paths are XPath
expressions evaluated relative to the <article> root unless a context node
is passed.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from lxml import etree

from article_importer.exceptions import DocumentError

logger = logging.getLogger(__name__)

XML_NS = "http://www.w3.org/XML/1998/namespace"
XML_LANG = f"{{{XML_NS}}}lang"


def _create_parser() -> etree.XMLParser:
    """Create a parser that never fetches DTDs or expands external entities."""
    return etree.XMLParser(
        load_dtd=False,
        no_network=True,
        resolve_entities=False,
        remove_blank_text=False,
    )


class JatsDocument:
    """A parsed JATS article.

    Attributes:
        root: The <article> element
        document_id: Identifier used in error reports (usually the file stem)
    """

    def __init__(self, root: etree._Element, document_id: str | None = None):
        self.root = root
        self.document_id = document_id

    @classmethod
    def from_path(cls, path: Path) -> "JatsDocument":
        """Parse a JATS XML file.

        Raises:
            DocumentError: If the file cannot be read or is not well-formed
        """
        try:
            tree = etree.parse(str(path), _create_parser())
        except (OSError, etree.XMLSyntaxError) as e:
            raise DocumentError(
                f"Failed to parse JATS document {path}: {e}", document_id=path.stem
            ) from e
        logger.debug(f"Parsed JATS document {path}")
        return cls(tree.getroot(), document_id=path.stem)

    @classmethod
    def from_string(cls, xml: str | bytes, document_id: str | None = None) -> "JatsDocument":
        """Parse JATS XML held in memory."""
        if isinstance(xml, str):
            xml = xml.encode("utf-8")
        try:
            root = etree.fromstring(xml, _create_parser())
        except etree.XMLSyntaxError as e:
            raise DocumentError(
                f"Failed to parse JATS document: {e}", document_id=document_id
            ) from e
        return cls(root, document_id=document_id)

    def select(self, path: str, node: etree._Element | None = None) -> list[etree._Element]:
        """Return the elements matching ``path``, in document order."""
        context = self.root if node is None else node
        return [match for match in context.xpath(path) if isinstance(match, etree._Element)]

    def select_first(self, path: str, node: etree._Element | None = None) -> etree._Element | None:
        matches = self.select(path, node)
        return matches[0] if matches else None

    def select_text(self, path: str, node: etree._Element | None = None) -> str:
        """Return the trimmed text content of the first match, or ""."""
        match = self.select_first(path, node)
        if match is None:
            return ""
        return text_of(match)

    def lang_of(self, node: etree._Element) -> str | None:
        """Return the xml:lang attribute of ``node``, if set."""
        return node.get(XML_LANG)

    def get_date_from_node(self, node: etree._Element | None) -> datetime | None:
        """Parse a JATS <pub-date> (or any date-like) element.

        The iso-8601-date attribute wins when present. Otherwise the <year>,
        <month> and <day> children are read; month and day default to 1 and
        month may be a name ("Mar", "March"). Returns an aware UTC midnight
        datetime, or None if no valid date can be built.
        """
        if node is None:
            return None

        iso_date = (node.get("iso-8601-date") or "").strip()
        if iso_date:
            parsed = _parse_date_parts(*(iso_date[:10].split("-") + ["", ""])[:3])
            if parsed is not None:
                return parsed
            logger.debug(f"Ignoring unparsable iso-8601-date {iso_date!r}")

        year = self.select_text("year", node)
        if not year:
            return None
        return _parse_date_parts(
            year,
            self.select_text("month", node),
            self.select_text("day", node),
        )


def text_of(node: etree._Element) -> str:
    """Return the trimmed text content of ``node`` without its tail."""
    return etree.tostring(node, method="text", encoding="unicode", with_tail=False).strip()


def local_name(node: etree._Element) -> str:
    return etree.QName(node).localname


def _parse_month(month: str) -> int:
    if month.isdigit():
        return int(month)
    return datetime.strptime(month[:3].title(), "%b").month


def _parse_date_parts(year: str, month: str = "", day: str = "") -> datetime | None:
    try:
        return datetime(
            int(year.strip()),
            _parse_month(month.strip()) if month.strip() else 1,
            int(day.strip()) if day.strip() else 1,
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None

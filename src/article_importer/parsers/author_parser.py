"""Author extraction."""

import logging
import re

from lxml import etree

from schemas.publication import Author, Publication

from .parser import ARTICLE_META, FrontMatterParser

logger = logging.getLogger(__name__)

AUTHOR_CONTRIBS = f'{ARTICLE_META}/contrib-group/contrib[@contrib-type="author"]'


class AuthorParser(FrontMatterParser):
    """Build Author records from <contrib contrib-type="author"> elements.

    Names, emails, ORCIDs and affiliations are read per contrib. Affiliations
    are resolved through <xref ref-type="aff" rid="..."> against <aff id="...">
    anywhere under <front>, or taken from an <aff> nested in the contrib.
    Localized values are keyed by the publication locale.
    """

    def process_authors(self, publication: Publication) -> None:
        """Populate ``publication.authors`` from the document."""
        publication.authors = self.parse(publication.locale)
        logger.debug(f"Added {len(publication.authors)} authors")

    def parse(self, locale: str | None = None) -> list[Author]:
        locale = locale or self.locale_resolver.default_locale
        affiliations = {
            aff.get("id"): self._affiliation_text(aff)
            for aff in self.document.select("front//aff[@id]")
        }

        authors = []
        for seq, node in enumerate(self.document.select(AUTHOR_CONTRIBS)):
            given_name = self.document.select_text("name/given-names", node)
            family_name = self.document.select_text("name/surname", node)
            if not given_name and not family_name:
                family_name = self.document.select_text("collab", node)
            if not given_name and not family_name:
                logger.warning(f"Skipping author {seq + 1} without a name")
                continue

            author = Author(
                given_name={locale: given_name} if given_name else {},
                family_name={locale: family_name} if family_name else {},
                email=self.document.select_text("email|address/email", node) or None,
                orcid=self.document.select_text('contrib-id[@contrib-id-type="orcid"]', node) or None,
                seq=len(authors),
                primary_contact=not authors,
            )
            affiliation = "; ".join(self._contrib_affiliations(node, affiliations))
            if affiliation:
                author.affiliation = {locale: affiliation}
            authors.append(author)
        return authors

    def _contrib_affiliations(self, node: etree._Element, affiliations: dict[str, str]) -> list[str]:
        found = []
        for xref in self.document.select('xref[@ref-type="aff"]', node):
            for rid in (xref.get("rid") or "").split():
                if affiliations.get(rid):
                    found.append(affiliations[rid])
        for aff in self.document.select("aff", node):
            text = self._affiliation_text(aff)
            if text and text not in found:
                found.append(text)
        return found

    def _affiliation_text(self, aff: etree._Element) -> str:
        """Affiliation text without its <label>."""
        parts = [
            text.strip()
            for text in aff.xpath("text()|*[not(self::label)]//text()")
            if text.strip()
        ]
        return re.sub(r"\s+([,;.])", r"\1", " ".join(parts))

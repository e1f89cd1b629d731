"""Public identifier extraction."""

import logging

from .parser import ARTICLE_META, FrontMatterParser

logger = logging.getLogger(__name__)


class PublicIdParser(FrontMatterParser):
    """Read <article-id> elements into a ``{type: value}`` map.

    Types are lowercased ("DOI" -> "doi"). Nodes are read in document order
    and a later node with the same type replaces an earlier one.
    """

    def parse(self) -> dict[str, str]:
        ids: dict[str, str] = {}
        for node in self.document.select(f"{ARTICLE_META}/article-id"):
            pub_id_type = (node.get("pub-id-type") or "").strip().lower()
            if not pub_id_type:
                logger.warning(
                    f"Skipping article-id without pub-id-type in {self.document.document_id}"
                )
                continue
            ids[pub_id_type] = self.document.select_text(".", node)
        return ids

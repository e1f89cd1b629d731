"""Parsers for JATS front matter."""

from .abstract_parser import AbstractParser
from .author_parser import AuthorParser
from .date_parser import PublicationDateParser
from .parser import FrontMatterParser
from .public_id_parser import PublicIdParser
from .publication_builder import PublicationBuilder
from .title_parser import TitleParser, TitleSet

__all__ = [
    "FrontMatterParser",
    "AbstractParser",
    "AuthorParser",
    "PublicationDateParser",
    "PublicIdParser",
    "PublicationBuilder",
    "TitleParser",
    "TitleSet",
]

"""Schema definitions for the JATS article importer."""

from .context import ImportContext, ImporterConfig, Issue, Section, SourceFile, Submission
from .publication import (
    ACCESS_OPEN,
    PUB_ID_PREFIX,
    STATUS_PUBLISHED,
    STATUS_QUEUED,
    Author,
    Publication,
    Representation,
    StoredFile,
)

__all__ = [
    "ACCESS_OPEN",
    "PUB_ID_PREFIX",
    "STATUS_PUBLISHED",
    "STATUS_QUEUED",
    "Author",
    "ImportContext",
    "ImporterConfig",
    "Issue",
    "Publication",
    "Representation",
    "Section",
    "SourceFile",
    "StoredFile",
    "Submission",
]

"""Import context schemas.

Describes everything the importer needs to know about the surroundings of
one JATS document: the submission it belongs to, the journal section and
issue, the already-ingested PDF, and the importer configuration.
"""

import json
from datetime import date
from pathlib import Path

from pydantic import BaseModel, Field


class Submission(BaseModel):
    """Submission that owns the imported publication."""

    id: int
    context_id: int | None = None


class Section(BaseModel):
    """Journal section the article is published in."""

    id: int
    title: str | None = None


class Issue(BaseModel):
    """Issue the article is published in.

    Attributes:
        id: Issue identifier
        date_published: Issue publication date, used when the article
            carries no usable pub-date of its own
    """

    id: int
    date_published: date | None = None


class SourceFile(BaseModel):
    """The article PDF, already ingested upstream."""

    path: Path

    @property
    def filename(self) -> str:
        return self.path.name


class ImporterConfig(BaseModel):
    """Configuration shared by every document of an import run.

    Attributes:
        default_locale: Locale used when a node has no xml:lang and for
            representation names and copyright fields
        locale_map: Language tag to locale code overrides (e.g. "en" -> "en_US")
        editor_id: User recorded as uploader of copied files
        genre_id: Genre of the stored galley file
        context_id: Journal the files are stored under
        file_stage: Storage stage of galley files
    """

    default_locale: str = "en"
    locale_map: dict[str, str] = {}
    editor_id: int | None = None
    genre_id: int | None = None
    context_id: int | None = None
    file_stage: str = "proof"

    @classmethod
    def from_file(cls, path: Path) -> "ImporterConfig":
        """Load configuration from a JSON file."""
        data = json.loads(path.read_text())
        return cls.model_validate(data)


class ImportContext(BaseModel):
    """Everything surrounding a single document import."""

    submission: Submission
    section: Section
    issue: Issue
    source_file: SourceFile
    config: ImporterConfig = Field(default_factory=ImporterConfig)

    @property
    def document_id(self) -> str:
        """Identifier used when reporting failures for this document."""
        return self.source_file.path.stem

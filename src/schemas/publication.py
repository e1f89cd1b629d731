"""Publication and representation schemas.

A Publication is the versioned metadata record of a submission. It is built
in memory as a draft from the JATS front matter, persisted once and then
published. A Representation is the publication's primary rendered artifact
(the PDF galley) and can only be created once the publication has an id.

Localized fields are plain ``{locale: text}`` dicts.
"""

from pydantic import BaseModel, Field

STATUS_QUEUED = 1
STATUS_PUBLISHED = 3

ACCESS_OPEN = 1

PUB_ID_PREFIX = "pub-id::"


class Author(BaseModel):
    """A contributor attached to a publication.

    Attributes:
        given_name: Given names keyed by locale
        family_name: Surname keyed by locale
        email: Contact email, if the document lists one
        affiliation: Affiliation text keyed by locale
        orcid: ORCID URL or bare identifier
        seq: 0-based position in document order
        primary_contact: True for the first author
        include_in_browse: Whether the author is listed in browse indexes
    """

    given_name: dict[str, str] = {}
    family_name: dict[str, str] = {}
    email: str | None = None
    affiliation: dict[str, str] = {}
    orcid: str | None = None
    seq: int = 0
    primary_contact: bool = False
    include_in_browse: bool = True


class Publication(BaseModel):
    """Publication record for an imported article.

    Attributes:
        id: Repository id, None while the publication is a draft
        submission_id: Owning submission
        status: STATUS_PUBLISHED on the draft; repositories store it as
            STATUS_QUEUED until it is published
        version: Always 1 for imported articles
        seq: Ordering within the issue (the submission id)
        access_status: ACCESS_OPEN for imported articles
        date_published: RFC 3339 timestamp with numeric UTC offset
        section_id: Journal section
        issue_id: Issue the article belongs to
        url_path: Custom URL path (never set by the importer)
        pages: Page range as "first-last"
        title: Title keyed by locale
        subtitle: Subtitle keyed by locale
        abstract: Sanitized HTML abstract keyed by locale
        public_ids: Identifier type (lowercase) to raw value
        copyright_holder: Copyright holder keyed by locale
        copyright_notice: Copyright statement keyed by locale
        copyright_year: Explicit copyright year or the publication year
        license_url: License URL (never set by the importer)
        locale: Canonical locale of the publication
        language: ISO 639-1 code derived from locale
        authors: Contributors in document order
    """

    id: int | None = None
    submission_id: int
    status: int = STATUS_PUBLISHED
    version: int = 1
    seq: int = 0
    access_status: int = ACCESS_OPEN
    date_published: str | None = None
    section_id: int | None = None
    issue_id: int | None = None
    url_path: str | None = None
    pages: str | None = None
    title: dict[str, str] = {}
    subtitle: dict[str, str] = {}
    abstract: dict[str, str] = {}
    public_ids: dict[str, str] = {}
    copyright_holder: dict[str, str] = {}
    copyright_notice: dict[str, str] = {}
    copyright_year: str | None = None
    license_url: str | None = None
    locale: str | None = None
    language: str | None = None
    authors: list[Author] = []

    def has_title(self) -> bool:
        """Return True if at least one locale has a non-empty title."""
        return any(value for value in self.title.values())

    def to_record(self) -> dict:
        """Flatten into the record layout used by the publishing service.

        Public identifiers are emitted under namespaced ``pub-id::<type>``
        keys instead of a nested mapping.
        """
        record = self.model_dump(exclude={"public_ids"})
        for pub_id_type, value in self.public_ids.items():
            record[f"{PUB_ID_PREFIX}{pub_id_type}"] = value
        return record


class Representation(BaseModel):
    """Primary rendered document of a publication (the PDF galley).

    Attributes:
        id: Repository id, None until inserted
        publication_id: Publication this galley belongs to
        name: Display name keyed by locale (the source file name)
        seq: Position among the publication's galleys
        label: Galley label shown to readers
        locale: Locale of the rendered document
        file_id: Stored file backing this galley
    """

    id: int | None = None
    publication_id: int
    name: dict[str, str] = {}
    seq: int = 1
    label: str = "PDF"
    locale: str
    file_id: int | None = None


class StoredFile(BaseModel):
    """Sidecar record describing a file copied into permanent storage."""

    id: int
    path: str
    original_name: str
    file_stage: str
    uploader_id: int | None = None
    genre_id: int | None = None
    assoc_type: str = "representation"
    assoc_id: int | None = None
    size: int = Field(default=0, ge=0)

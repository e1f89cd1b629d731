"""Custom exceptions for article imports.

Every error aborts the import of the current document. Errors raised after
the publication was added to the repository carry its id, so the caller can
tell a persisted-but-incomplete import from one that left nothing behind.
"""


class ArticleImportError(Exception):
    """Base exception for all import errors."""

    stage: str | None = None

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        stage: str | None = None,
        *args,
        **kwargs,
    ):
        self.message = message
        self.document_id = document_id
        if stage is not None:
            self.stage = stage
        super().__init__(message, *args, **kwargs)

    def __str__(self) -> str:
        if self.document_id:
            return f"[{self.document_id}] {self.message}"
        return self.message

    @property
    def persisted(self) -> bool:
        """True if a publication was left in the repository."""
        return False


class DocumentError(ArticleImportError):
    """Raised when the JATS document cannot be read or parsed."""

    stage = "parse"


class MissingTitleError(ArticleImportError):
    """Raised when no title node yields any text."""

    stage = "title"

    def __init__(self, message: str = "Article title is missing", *args, **kwargs):
        super().__init__(message, *args, **kwargs)


class MissingPublicationDateError(ArticleImportError):
    """Raised when neither the document nor the issue provides a date."""

    stage = "date"

    def __init__(self, message: str = "Publication date is missing", *args, **kwargs):
        super().__init__(message, *args, **kwargs)


class CommitError(ArticleImportError):
    """Base for errors raised while persisting a publication."""

    def __init__(self, message: str, publication_id: int | None = None, *args, **kwargs):
        self.publication_id = publication_id
        super().__init__(message, *args, **kwargs)

    @property
    def persisted(self) -> bool:
        return self.publication_id is not None


class PersistenceError(CommitError):
    """Raised when the repository fails to add or publish the publication."""


class AttachmentError(CommitError):
    """Raised when the PDF galley cannot be created or its file stored."""

    stage = "attach"

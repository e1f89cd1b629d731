"""Single-document import: parse, build and commit one JATS article."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from schemas.context import ImportContext
from schemas.publication import Publication, Representation

from .exceptions import ArticleImportError
from .jats import JatsDocument, LocaleResolver
from .parsers import PublicationBuilder
from .persistence import PublicationCommitter
from .protocols import FileStore, Repository

logger = logging.getLogger(__name__)

ImportStatus = Literal["published", "failed", "incomplete"]


@dataclass
class ImportResult:
    """Outcome of importing one document.

    Attributes:
        document_id: Identifier of the imported document
        status: "published" on success, "incomplete" when the publication
            was stored but attaching or publishing failed, "failed" when
            nothing was stored
        publication: The published publication (success only)
        representation: The PDF galley (success only)
        error: The error that stopped the import
    """

    document_id: str
    status: ImportStatus
    publication: Publication | None = None
    representation: Representation | None = None
    error: ArticleImportError | None = None

    @property
    def ok(self) -> bool:
        return self.status == "published"

    @property
    def incomplete(self) -> bool:
        return self.status == "incomplete"

    @property
    def publication_id(self) -> int | None:
        if self.publication is not None:
            return self.publication.id
        return getattr(self.error, "publication_id", None)


class PublicationImporter:
    """Import JATS articles into a repository.

    Wires PublicationBuilder and PublicationCommitter together for one
    document at a time. Documents are independent; a failure never affects
    the next call.

    Example:
        importer = PublicationImporter(JsonRepository(out), LocalFileStore(out / "files"))
        result = importer.run(Path("article.xml"), context)
        if result.incomplete:
            ...
    """

    def __init__(self, repository: Repository, file_store: FileStore):
        self.repository = repository
        self.file_store = file_store

    def import_document(
        self, document: JatsDocument, context: ImportContext
    ) -> tuple[Publication, Representation]:
        """Build and commit the publication for a parsed document.

        Raises:
            ArticleImportError: Any of the import error kinds
        """
        document_id = document.document_id or context.document_id
        locale_resolver = LocaleResolver(context.config.default_locale, context.config.locale_map)

        logger.info(f"Importing {document_id} into submission {context.submission.id}")
        draft = PublicationBuilder(document, context, locale_resolver).build()

        committer = PublicationCommitter(self.repository, self.file_store, context.config)
        return committer.commit(draft, context.source_file, document_id=document_id)

    def run(self, source: JatsDocument | Path, context: ImportContext) -> ImportResult:
        """Import a document, reporting the outcome instead of raising.

        Args:
            source: A parsed document or the path of a JATS XML file
            context: Submission, section, issue and PDF of the article

        Returns:
            ImportResult describing success, failure or a partial import
        """
        document_id = context.document_id
        try:
            document = source if isinstance(source, JatsDocument) else JatsDocument.from_path(source)
            document_id = document.document_id or document_id
            publication, representation = self.import_document(document, context)
        except ArticleImportError as e:
            status: ImportStatus = "incomplete" if e.persisted else "failed"
            if e.document_id is None:
                e.document_id = document_id
            logger.error(f"Import of {document_id} {status} at stage {e.stage}: {e.message}")
            return ImportResult(document_id=document_id, status=status, error=e)

        return ImportResult(
            document_id=document_id,
            status="published",
            publication=publication,
            representation=representation,
        )

"""Persistence of draft publications.

Committing is a sequence of independent calls with no rollback:

1. Add the publication to the repository
2. Create the PDF galley and copy the source file into storage
3. Publish the publication (the repository stores it queued until then)

A failure in step 1 leaves nothing behind. A failure in step 2 or 3 leaves
the publication stored but not (fully) published; the raised error carries
the publication id so the caller can report or repair it.
"""

import logging

from article_importer.exceptions import AttachmentError, MissingTitleError, PersistenceError
from article_importer.protocols import FileStore, Repository
from schemas.context import ImporterConfig, SourceFile
from schemas.publication import Publication, Representation

logger = logging.getLogger(__name__)

REPRESENTATION_ASSOC_TYPE = "representation"


class PublicationCommitter:
    """Add, attach and publish a draft publication.

    Attributes:
        repository: Stores publications and representations
        file_store: Copies the source PDF into permanent storage
        config: Supplies locale, uploader, genre and file stage
    """

    def __init__(self, repository: Repository, file_store: FileStore, config: ImporterConfig):
        self.repository = repository
        self.file_store = file_store
        self.config = config

    def commit(
        self,
        draft: Publication,
        source_file: SourceFile,
        document_id: str | None = None,
    ) -> tuple[Publication, Representation]:
        """Persist and publish a draft, attaching its PDF galley.

        The draft itself is left untouched; the returned publication is a
        copy carrying the repository id.

        Args:
            draft: Publication built by PublicationBuilder
            source_file: The already-ingested article PDF
            document_id: Identifier used in error reports

        Returns:
            Tuple of the published publication and its representation

        Raises:
            MissingTitleError: If the draft has no locale or title
            PersistenceError: If adding or publishing fails
            AttachmentError: If the galley or its file cannot be stored
        """
        if draft.locale is None or not draft.has_title():
            raise MissingTitleError(
                "Refusing to persist a publication without locale and title",
                document_id=document_id,
            )

        try:
            publication_id = self.repository.add(draft)
        except Exception as e:
            logger.error(f"Failed to add publication for {document_id}: {e}")
            raise PersistenceError(
                f"Failed to add publication: {e}", document_id=document_id, stage="add"
            ) from e

        publication = draft.model_copy(update={"id": publication_id}, deep=True)
        logger.info(f"Added publication {publication_id} for {document_id}")

        try:
            representation = self.attach_representation(publication, source_file)
        except Exception as e:
            logger.error(f"Failed to attach PDF to publication {publication_id}: {e}")
            raise AttachmentError(
                f"Failed to attach {source_file.filename}: {e}",
                publication_id=publication_id,
                document_id=document_id,
            ) from e

        try:
            self.repository.publish(publication)
        except Exception as e:
            logger.error(f"Failed to publish publication {publication_id}: {e}")
            raise PersistenceError(
                f"Failed to publish publication {publication_id}: {e}",
                publication_id=publication_id,
                document_id=document_id,
                stage="publish",
            ) from e

        logger.info(f"Published publication {publication_id} for {document_id}")
        return publication, representation

    def attach_representation(self, publication: Publication, source_file: SourceFile) -> Representation:
        """Create the PDF galley and store its file.

        The representation is inserted first so the stored file can be
        associated with its id, then updated with the returned file id.
        """
        locale = self.config.default_locale
        representation = Representation(
            publication_id=publication.id,
            name={locale: source_file.filename},
            seq=1,
            label="PDF",
            locale=locale,
        )
        representation.id = self.repository.add_representation(representation)

        representation.file_id = self.file_store.copy(
            source_file.path,
            self.config.file_stage,
            self.config.editor_id,
            self.config.genre_id,
            REPRESENTATION_ASSOC_TYPE,
            representation.id,
        )
        self.repository.update_representation(representation)
        logger.debug(
            f"Attached file {representation.file_id} to representation {representation.id}"
        )
        return representation

"""Protocol definitions for importer collaborators."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from schemas.publication import Publication, Representation


@runtime_checkable
class Repository(Protocol):
    """Protocol for the service that stores and publishes publications."""

    def add(self, publication: Publication) -> int:
        """Insert a draft publication and return its id."""
        ...

    def publish(self, publication: Publication) -> None:
        """Transition a stored publication to published."""
        ...

    def add_representation(self, representation: Representation) -> int:
        """Insert a representation and return its id."""
        ...

    def update_representation(self, representation: Representation) -> None:
        """Persist changes to a stored representation."""
        ...


@runtime_checkable
class FileStore(Protocol):
    """Protocol for permanent file storage."""

    def copy(
        self,
        source_path: Path,
        file_stage: str,
        uploader_id: int | None,
        genre_id: int | None,
        assoc_type: str,
        assoc_id: int | None,
    ) -> int:
        """Copy a file into storage, associate it and return its file id."""
        ...


@runtime_checkable
class ContributorProcessor(Protocol):
    """Protocol for the step that attaches contributors to a draft."""

    def process_authors(self, publication: Publication) -> None:
        """Populate contributor data on the publication."""
        ...


__all__ = [
    "ContributorProcessor",
    "FileStore",
    "Repository",
]

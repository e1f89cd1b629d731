"""JSON-on-disk repository.

Stores each publication and representation as a pretty-printed JSON file:

    {root}/
    ├── publications/
    │   ├── 1.json
    │   └── ...
    └── representations/
        ├── 1.json
        └── ...

Ids are assigned sequentially per record type. Publications are stored
queued and only marked published by ``publish``.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel

from schemas.publication import STATUS_PUBLISHED, STATUS_QUEUED, Publication, Representation

logger = logging.getLogger(__name__)


class JsonRepository:
    """Repository writing records as JSON files under ``root``."""

    def __init__(self, root: Path):
        self.root = root
        self.publications_dir = root / "publications"
        self.representations_dir = root / "representations"
        self.publications_dir.mkdir(parents=True, exist_ok=True)
        self.representations_dir.mkdir(parents=True, exist_ok=True)

    def add(self, publication: Publication) -> int:
        publication_id = self._next_id(self.publications_dir)
        record = publication.model_copy(update={"id": publication_id, "status": STATUS_QUEUED})
        self._write(self.publications_dir, publication_id, record)
        logger.debug(f"Stored publication {publication_id}")
        return publication_id

    def publish(self, publication: Publication) -> None:
        stored = self.get_publication(self._require_id(publication))
        stored.status = STATUS_PUBLISHED
        self._write(self.publications_dir, stored.id, stored)
        logger.debug(f"Published publication {stored.id}")

    def add_representation(self, representation: Representation) -> int:
        representation_id = self._next_id(self.representations_dir)
        record = representation.model_copy(update={"id": representation_id})
        self._write(self.representations_dir, representation_id, record)
        return representation_id

    def update_representation(self, representation: Representation) -> None:
        representation_id = self._require_id(representation)
        if not (self.representations_dir / f"{representation_id}.json").exists():
            raise KeyError(f"Representation {representation_id} not found")
        self._write(self.representations_dir, representation_id, representation)

    def get_publication(self, publication_id: int) -> Publication:
        """Load a stored publication.

        Raises:
            KeyError: If no publication has this id
        """
        path = self.publications_dir / f"{publication_id}.json"
        if not path.exists():
            raise KeyError(f"Publication {publication_id} not found")
        return Publication.model_validate(json.loads(path.read_text()))

    def get_representation(self, representation_id: int) -> Representation:
        path = self.representations_dir / f"{representation_id}.json"
        if not path.exists():
            raise KeyError(f"Representation {representation_id} not found")
        return Representation.model_validate(json.loads(path.read_text()))

    def _require_id(self, record: Publication | Representation) -> int:
        if record.id is None:
            raise ValueError(f"{type(record).__name__} has not been added yet")
        return record.id

    def _next_id(self, directory: Path) -> int:
        ids = [int(path.stem) for path in directory.glob("*.json") if path.stem.isdigit()]
        return max(ids, default=0) + 1

    def _write(self, directory: Path, record_id: int, record: BaseModel) -> None:
        path = directory / f"{record_id}.json"
        path.write_text(record.model_dump_json(indent=2))

"""Local permanent file storage."""

import json
import logging
import shutil
from pathlib import Path

from schemas.publication import StoredFile

logger = logging.getLogger(__name__)


class LocalFileStore:
    """Copy ingested files into a directory tree and record them.

    Files land in ``{root}/{assoc_type}/{assoc_id}/{file_id}-{name}`` and a
    StoredFile record is written next to the copy as ``{file_id}.json``
    under ``{root}/records``. File ids are sequential.
    """

    def __init__(self, root: Path):
        self.root = root
        self.records_dir = root / "records"
        self.records_dir.mkdir(parents=True, exist_ok=True)

    def copy(
        self,
        source_path: Path,
        file_stage: str,
        uploader_id: int | None,
        genre_id: int | None,
        assoc_type: str,
        assoc_id: int | None,
    ) -> int:
        """Copy ``source_path`` into storage and return the new file id.

        Raises:
            FileNotFoundError: If the source file does not exist
        """
        source_path = Path(source_path)
        if not source_path.is_file():
            raise FileNotFoundError(f"Source file not found: {source_path}")

        file_id = self._next_id()
        destination = self.root / assoc_type / str(assoc_id) / f"{file_id}-{source_path.name}"
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source_path, destination)

        record = StoredFile(
            id=file_id,
            path=str(destination.relative_to(self.root)),
            original_name=source_path.name,
            file_stage=file_stage,
            uploader_id=uploader_id,
            genre_id=genre_id,
            assoc_type=assoc_type,
            assoc_id=assoc_id,
            size=destination.stat().st_size,
        )
        (self.records_dir / f"{file_id}.json").write_text(record.model_dump_json(indent=2))
        logger.debug(f"Copied {source_path} to {destination}")
        return file_id

    def get(self, file_id: int) -> StoredFile:
        """Load the record of a stored file.

        Raises:
            KeyError: If no file has this id
        """
        path = self.records_dir / f"{file_id}.json"
        if not path.exists():
            raise KeyError(f"File {file_id} not found")
        return StoredFile.model_validate(json.loads(path.read_text()))

    def _next_id(self) -> int:
        ids = [int(path.stem) for path in self.records_dir.glob("*.json") if path.stem.isdigit()]
        return max(ids, default=0) + 1

"""Tests for the JSON repository and the local file store."""

import json

import pytest

from article_importer.persistence import JsonRepository, LocalFileStore
from schemas.publication import STATUS_PUBLISHED, STATUS_QUEUED, Publication, Representation


@pytest.fixture
def repository(tmp_path):
    return JsonRepository(tmp_path / "records")


@pytest.fixture
def file_store(tmp_path):
    return LocalFileStore(tmp_path / "files")


class TestJsonRepository:
    def test_add_assigns_sequential_ids(self, repository):
        first = repository.add(Publication(submission_id=1, title={"en": "One"}))
        second = repository.add(Publication(submission_id=2, title={"en": "Two"}))

        assert (first, second) == (1, 2)
        assert repository.get_publication(2).title == {"en": "Two"}

    def test_add_writes_json_file(self, repository):
        publication_id = repository.add(
            Publication(submission_id=1, public_ids={"doi": "10.1/x"})
        )

        data = json.loads((repository.publications_dir / f"{publication_id}.json").read_text())
        assert data["id"] == publication_id
        assert data["public_ids"] == {"doi": "10.1/x"}

    def test_add_does_not_mutate_argument(self, repository):
        publication = Publication(submission_id=1)

        repository.add(publication)

        assert publication.id is None

    def test_publish_requires_stored_publication(self, repository):
        with pytest.raises(ValueError):
            repository.publish(Publication(submission_id=1))
        with pytest.raises(KeyError):
            repository.publish(Publication(id=99, submission_id=1))

    def test_add_stores_publication_queued(self, repository):
        publication_id = repository.add(Publication(submission_id=1, status=STATUS_PUBLISHED))

        assert repository.get_publication(publication_id).status == STATUS_QUEUED

    def test_publish_marks_publication_published(self, repository):
        publication_id = repository.add(Publication(submission_id=1))
        before = (repository.publications_dir / f"{publication_id}.json").read_text()

        repository.publish(Publication(id=publication_id, submission_id=1))

        after = (repository.publications_dir / f"{publication_id}.json").read_text()
        assert after != before
        assert repository.get_publication(publication_id).status == STATUS_PUBLISHED

    def test_representation_round_trip(self, repository):
        representation = Representation(publication_id=1, locale="en", name={"en": "a.pdf"})

        representation.id = repository.add_representation(representation)
        representation.file_id = 12
        repository.update_representation(representation)

        stored = repository.get_representation(representation.id)
        assert stored.file_id == 12
        assert stored.label == "PDF"

    def test_update_unknown_representation(self, repository):
        with pytest.raises(KeyError):
            repository.update_representation(Representation(id=5, publication_id=1, locale="en"))


class TestLocalFileStore:
    def test_copy_stores_file_and_record(self, file_store, sample_pdf):
        file_id = file_store.copy(sample_pdf, "proof", 7, 3, "representation", 501)

        record = file_store.get(file_id)
        assert file_id == 1
        assert record.original_name == "jt-2021-042.pdf"
        assert record.assoc_id == 501
        assert record.uploader_id == 7
        assert record.size == sample_pdf.stat().st_size
        assert (file_store.root / record.path).read_bytes() == sample_pdf.read_bytes()

    def test_copy_keeps_source(self, file_store, sample_pdf):
        file_store.copy(sample_pdf, "proof", None, None, "representation", 1)

        assert sample_pdf.exists()

    def test_sequential_ids(self, file_store, sample_pdf):
        ids = [file_store.copy(sample_pdf, "proof", None, None, "representation", n) for n in (1, 2)]

        assert ids == [1, 2]

    def test_missing_source(self, file_store, tmp_path):
        with pytest.raises(FileNotFoundError):
            file_store.copy(tmp_path / "missing.pdf", "proof", None, None, "representation", 1)

    def test_unknown_file(self, file_store):
        with pytest.raises(KeyError):
            file_store.get(3)

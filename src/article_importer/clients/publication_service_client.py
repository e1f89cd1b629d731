"""Publishing service client implementing the importer repository."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from schemas.publication import PUB_ID_PREFIX, STATUS_QUEUED, Publication, Representation

from .client import Client
from .exceptions import ResponseValidationError

logger = logging.getLogger(__name__)


class PublicationServiceClient(Client):
    """Client for a journal publishing service REST API.

    Implements the Repository protocol, so it can be handed directly to
    PublicationCommitter.

    Example:
        config = {"base_url": "https://journal.example.org/api/v1", "api_token": "..."}
        with PublicationServiceClient(config) as client:
            publication_id = client.add(publication)
            client.publish(publication.model_copy(update={"id": publication_id}))
    """

    def fetch(self, submission_id: int, publication_id: int) -> Publication:
        """Fetch a stored publication.

        Raises:
            ResponseValidationError: If the record does not match the schema
            NotFoundError: If the publication does not exist
        """
        response = self.get(self._publication_path(submission_id, publication_id))
        data = self._json(response)
        public_ids = {
            key[len(PUB_ID_PREFIX):]: data.pop(key)
            for key in list(data)
            if key.startswith(PUB_ID_PREFIX)
        }
        try:
            return Publication.model_validate({**data, "public_ids": public_ids})
        except PydanticValidationError as e:
            raise ResponseValidationError(
                f"Invalid publication {publication_id} returned by service", errors=e.errors()
            ) from e

    def add(self, publication: Publication) -> int:
        record = publication.to_record()
        record.pop("id", None)
        record["status"] = STATUS_QUEUED
        response = self.post(
            f"/submissions/{publication.submission_id}/publications", json=record
        )
        publication_id = self._extract_id(response)
        logger.debug(f"Service created publication {publication_id}")
        return publication_id

    def publish(self, publication: Publication) -> None:
        if publication.id is None:
            raise ValueError("Cannot publish a publication that has not been added")
        self.put(f"{self._publication_path(publication.submission_id, publication.id)}/publish")

    def add_representation(self, representation: Representation) -> int:
        response = self.post("/galleys", json=representation.model_dump(exclude={"id"}))
        return self._extract_id(response)

    def update_representation(self, representation: Representation) -> None:
        if representation.id is None:
            raise ValueError("Cannot update a representation that has not been added")
        self.put(f"/galleys/{representation.id}", json=representation.model_dump())

    def _publication_path(self, submission_id: int, publication_id: int) -> str:
        return f"/submissions/{submission_id}/publications/{publication_id}"

    def _json(self, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise ResponseValidationError(f"Response from {response.url} is not JSON") from e
        if not isinstance(data, dict):
            raise ResponseValidationError(f"Expected a JSON object from {response.url}")
        return data

    def _extract_id(self, response: httpx.Response) -> int:
        data = self._json(response)
        try:
            return int(data["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise ResponseValidationError(
                f"Response from {response.url} has no usable id", errors=[str(e)]
            ) from e

"""HTTP clients for the publishing service."""

from .client import Client
from .exceptions import (
    APIError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    ResponseValidationError,
    ServiceConnectionError,
    ServiceError,
)
from .publication_service_client import PublicationServiceClient

__all__ = [
    "Client",
    "PublicationServiceClient",
    "ServiceError",
    "ServiceConnectionError",
    "APIError",
    "ConflictError",
    "NotFoundError",
    "RateLimitError",
    "ResponseValidationError",
]

"""Persistence of imported publications."""

from .committer import PublicationCommitter
from .file_store import LocalFileStore
from .json_repository import JsonRepository

__all__ = [
    "JsonRepository",
    "LocalFileStore",
    "PublicationCommitter",
]

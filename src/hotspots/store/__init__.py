"""Hierarchical document store clients."""

from .base import (
    DocumentReader,
    DocumentStore,
    InvalidPathException,
    PreconditionFailed,
    StoreException,
)
from .factory import StoreClients, create_store_clients
from .memory import InMemoryDocumentStore

__all__ = [
    "DocumentReader",
    "DocumentStore",
    "InMemoryDocumentStore",
    "InvalidPathException",
    "PreconditionFailed",
    "StoreClients",
    "StoreException",
    "create_store_clients",
]

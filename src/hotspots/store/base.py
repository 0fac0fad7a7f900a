"""Core interfaces for the hierarchical document store."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from ..logging import get_logger

logger = get_logger(__name__)

# Characters Firebase does not allow in keys
ILLEGAL_KEY_CHARACTERS = frozenset(".$#[]/")

TransactionUpdate = Callable[[Any], Any]


class StoreException(Exception):
    """Base exception for store operations."""

    pass


class PreconditionFailed(StoreException):
    """Raised from a transaction update to abort the write."""

    def __init__(self, path: str, message: str | None = None):
        self.path = path
        super().__init__(message or f"Precondition failed at {path}")


class InvalidPathException(StoreException):
    """A path segment contains characters the store does not accept."""

    pass


def split_path(path: str) -> list[str]:
    """Split a slash-delimited path into its non-empty segments."""
    return [segment for segment in path.strip("/").split("/") if segment]


def validate_key(key: Any) -> str:
    """Return ``key`` if it is usable as a single path segment."""
    if not isinstance(key, str) or not key:
        raise InvalidPathException(f"Invalid key: {key!r}")
    if any(ch in ILLEGAL_KEY_CHARACTERS for ch in key):
        raise InvalidPathException(f"Key contains illegal characters: {key!r}")
    if any(ord(ch) < 32 or ord(ch) == 127 for ch in key):
        raise InvalidPathException(f"Key contains control characters: {key!r}")
    return key


def join_path(*keys: str) -> str:
    """Join validated keys into a store path."""
    return "/".join(validate_key(key) for key in keys)


class DocumentReader(ABC):
    """Read access to documents addressed by path."""

    @abstractmethod
    async def get(self, path: str) -> Any:
        """Return the document at ``path``, or None when nothing is stored there."""
        pass

    async def exists(self, path: str) -> bool:
        return await self.get(path) is not None

    async def aclose(self) -> None:
        """Release any underlying connections."""
        pass


class DocumentStore(DocumentReader):
    """Read/write access to a hierarchical document store."""

    @abstractmethod
    async def set(self, path: str, value: Any) -> None:
        """Replace the node at ``path`` with ``value``."""
        pass

    @abstractmethod
    async def remove(self, path: str) -> None:
        """Delete the node at ``path`` and everything below it."""
        pass

    @abstractmethod
    async def push(self, path: str, value: Any) -> str:
        """Append ``value`` under a generated child key of ``path`` and return the key."""
        pass

    @abstractmethod
    async def transaction(self, path: str, update: TransactionUpdate) -> Any:
        """Atomically replace the node at ``path`` with ``update(current)``.

        ``update`` receives the current value (None when absent) and returns
        the new, non-None value. Raising ``PreconditionFailed`` aborts without
        writing and propagates to the caller. The update may be called more
        than once when the node changes concurrently. Returns the value that
        was written.
        """
        pass

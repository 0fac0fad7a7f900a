"""
Conditional mutation gate

Every write goes through here: input presence checks, the existence
precondition for updates and deletes, and stamping of generated metadata
(identifiers, ``createdAt``) before the payload is persisted.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from .documents import children_of, new_id, normalize_document, timestamp
from .logging import get_logger
from .paths import edited_movies_path, hotspot_path, movie_path, user_path
from .store.base import DocumentStore, InvalidPathException, PreconditionFailed, StoreException

logger = get_logger(__name__)

T = TypeVar("T")

NO_DATA = "No data provided"
INVALID_REQUEST = "Invalid request"


class GateStatus(Enum):
    OK = "ok"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"


@dataclass(frozen=True)
class GateResult(Generic[T]):
    """Outcome of a gated mutation.

    ``value`` is set only for OK results. ``message`` describes the failure for
    the other statuses and ``path`` names the node that failed the precondition.
    """

    status: GateStatus
    value: T | None = None
    message: str | None = None
    path: str | None = None

    @classmethod
    def ok(cls, value: T) -> "GateResult[T]":
        return cls(GateStatus.OK, value=value)

    @classmethod
    def invalid(cls, message: str) -> "GateResult[T]":
        return cls(GateStatus.INVALID, message=message)

    @classmethod
    def not_found(cls, path: str, message: str) -> "GateResult[T]":
        return cls(GateStatus.NOT_FOUND, message=message, path=path)

    @classmethod
    def store_error(cls, message: str, path: str | None = None) -> "GateResult[T]":
        return cls(GateStatus.STORE_ERROR, message=message, path=path)

    @property
    def succeeded(self) -> bool:
        return self.status is GateStatus.OK


def _present(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


class MutationGate:
    """Precondition-checked writes against a document store."""

    def __init__(
        self,
        store: DocumentStore,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], str] = timestamp,
    ):
        self.store = store
        self._new_id = id_factory
        self._clock = clock

    async def create_user(self, data: Mapping[str, Any] | None) -> GateResult[dict[str, Any]]:
        """Upsert a user at ``users/{uid}``, generating the uid when absent."""
        if not isinstance(data, Mapping):
            return GateResult.invalid(NO_DATA)

        payload = dict(data)
        uid = payload.get("uid")
        if not _present(uid):
            uid = self._new_id()
            payload["uid"] = uid

        try:
            path = user_path(uid)
        except InvalidPathException as e:
            return GateResult.invalid(str(e))

        document = normalize_document(payload)
        try:
            await self.store.set(path, document)
        except StoreException as e:
            logger.error("Failed to save user", uid=uid, error=str(e))
            return GateResult.store_error(str(e), path)

        logger.info("User saved", uid=uid)
        return GateResult.ok(document)

    async def add_movie(self, data: Mapping[str, Any] | None) -> GateResult[dict[str, Any]]:
        """Create a movie and record it in the editor's ``editedMovies`` list.

        The back-reference is pushed after the movie is written. A failed push
        leaves the movie in place and is only logged.
        """
        if not isinstance(data, Mapping):
            return GateResult.invalid(NO_DATA)

        movie_id = self._new_id()
        document = normalize_document({**data, "id": movie_id, "createdAt": self._clock()})

        editor_id = document.get("editorId")
        try:
            path = movie_path(movie_id)
            editor_list = edited_movies_path(editor_id) if editor_id is not None else None
        except InvalidPathException as e:
            return GateResult.invalid(str(e))

        try:
            await self.store.set(path, document)
        except StoreException as e:
            logger.error("Failed to save movie", movie_id=movie_id, error=str(e))
            return GateResult.store_error(str(e), path)

        if editor_list is None:
            logger.warning("Movie has no editorId, skipping editedMovies", movie_id=movie_id)
        else:
            try:
                await self.store.push(editor_list, movie_id)
            except StoreException as e:
                logger.error(
                    "Failed to record edited movie",
                    movie_id=movie_id,
                    editor_id=editor_id,
                    error=str(e),
                )

        logger.info("Movie added", movie_id=movie_id, editor_id=editor_id)
        return GateResult.ok(document)

    async def update_movie(
        self, movie_id: str | None, data: Mapping[str, Any] | None
    ) -> GateResult[dict[str, Any]]:
        """Overwrite an existing movie with ``data``."""
        if not _present(movie_id) or not isinstance(data, Mapping):
            return GateResult.invalid(INVALID_REQUEST)

        try:
            path = movie_path(movie_id)
        except InvalidPathException as e:
            return GateResult.invalid(str(e))

        document = normalize_document({**data, "id": movie_id})
        return await self._replace_existing(path, document, "Movie not found", movie_id=movie_id)

    async def add_hotspot(
        self, movie_id: str | None, data: Mapping[str, Any] | None
    ) -> GateResult[dict[str, Any]]:
        """Insert a hotspot under an existing movie."""
        if not _present(movie_id) or not isinstance(data, Mapping):
            return GateResult.invalid(INVALID_REQUEST)

        hotspot_id = self._new_id()
        try:
            path = movie_path(movie_id)
            hotspot_path(movie_id, hotspot_id)
        except InvalidPathException as e:
            return GateResult.invalid(str(e))

        document = normalize_document({**data, "id": hotspot_id})

        def insert(current: Any) -> Any:
            if current is None:
                raise PreconditionFailed(path)
            movie = children_of(current)
            hotspots = children_of(movie.get("hotspots"))
            hotspots[hotspot_id] = document
            movie["hotspots"] = hotspots
            return movie

        try:
            await self.store.transaction(path, insert)
        except PreconditionFailed:
            logger.info("Movie not found", path=path, movie_id=movie_id)
            return GateResult.not_found(path, "Movie not found")
        except StoreException as e:
            logger.error("Failed to add hotspot", movie_id=movie_id, error=str(e))
            return GateResult.store_error(str(e), path)

        logger.info("Hotspot added", movie_id=movie_id, hotspot_id=hotspot_id)
        return GateResult.ok(document)

    async def edit_hotspot(
        self,
        movie_id: str | None,
        hotspot_id: str | None,
        data: Mapping[str, Any] | None,
    ) -> GateResult[dict[str, Any]]:
        """Overwrite an existing hotspot with ``data``."""
        if not _present(movie_id) or not _present(hotspot_id) or not isinstance(data, Mapping):
            return GateResult.invalid(INVALID_REQUEST)

        try:
            path = hotspot_path(movie_id, hotspot_id)
        except InvalidPathException as e:
            return GateResult.invalid(str(e))

        document = normalize_document({**data, "id": hotspot_id})
        return await self._replace_existing(
            path, document, "Hotspot not found", movie_id=movie_id, hotspot_id=hotspot_id
        )

    async def delete_hotspot(self, movie_id: str | None, hotspot_id: str | None) -> GateResult[str]:
        """Remove an existing hotspot and return its id.

        The existence check and the removal are separate calls: the realtime
        SDK has no conditional delete.
        """
        if not _present(movie_id) or not _present(hotspot_id):
            return GateResult.invalid(INVALID_REQUEST)

        try:
            path = hotspot_path(movie_id, hotspot_id)
        except InvalidPathException as e:
            return GateResult.invalid(str(e))

        try:
            if not await self.store.exists(path):
                logger.info("Hotspot not found", path=path, movie_id=movie_id)
                return GateResult.not_found(path, "Hotspot not found")
            await self.store.remove(path)
        except StoreException as e:
            logger.error("Failed to delete hotspot", path=path, error=str(e))
            return GateResult.store_error(str(e), path)

        logger.info("Hotspot deleted", movie_id=movie_id, hotspot_id=hotspot_id)
        return GateResult.ok(hotspot_id)

    async def _replace_existing(
        self, path: str, document: dict[str, Any], missing: str, **log_fields: Any
    ) -> GateResult[dict[str, Any]]:
        def replace(current: Any) -> Any:
            if current is None:
                raise PreconditionFailed(path)
            return document

        try:
            await self.store.transaction(path, replace)
        except PreconditionFailed:
            logger.info(missing, path=path, **log_fields)
            return GateResult.not_found(path, missing)
        except StoreException as e:
            logger.error("Failed to replace document", path=path, error=str(e), **log_fields)
            return GateResult.store_error(str(e), path)

        return GateResult.ok(document)

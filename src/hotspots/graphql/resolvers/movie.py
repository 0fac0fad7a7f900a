from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ...documents import children_of
from ...logging import get_logger
from ...paths import MOVIES, movie_path
from ...store.base import InvalidPathException
from .. import mapping
from ..context import get_gate_from_info, get_store_clients_from_info
from .outcomes import to_payload

if TYPE_CHECKING:
    from ..types.movie import Movie

logger = get_logger(__name__)


# Query resolvers
async def resolve_movie(info: strawberry.Info, id: str) -> Movie | None:
    """Fetch ``movies/{id}`` through the REST reader."""
    try:
        path = movie_path(id)
    except InvalidPathException:
        logger.info("Invalid movie id", movie_id=id)
        return None

    stores = get_store_clients_from_info(info)
    doc = await stores.reader.get(path)
    if doc is None:
        logger.info("Movie not found", movie_id=id)
    return mapping.movie(doc, id)


async def resolve_movies(info: strawberry.Info) -> list[Movie]:
    stores = get_store_clients_from_info(info)
    docs = await stores.reader.get(MOVIES)
    movies = (mapping.movie(doc, key) for key, doc in children_of(docs).items())
    return [movie for movie in movies if movie is not None]


# Mutation resolvers
async def add_movie(info: strawberry.Info, data: dict[str, Any] | None) -> Any:
    result = await get_gate_from_info(info).add_movie(data)
    return to_payload(result, lambda doc: mapping.movie(doc))


async def update_movie(info: strawberry.Info, id: str | None, data: dict[str, Any] | None) -> Any:
    result = await get_gate_from_info(info).update_movie(id, data)
    return to_payload(result, lambda doc: mapping.movie(doc, id))

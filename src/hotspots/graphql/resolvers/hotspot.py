from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ...logging import get_logger
from ...paths import hotspot_path
from ...store.base import InvalidPathException
from .. import mapping
from ..context import get_gate_from_info, get_store_clients_from_info
from ..types.results import DeletedHotspot
from .outcomes import to_payload

if TYPE_CHECKING:
    from ..types.hotspot import Hotspot

logger = get_logger(__name__)


# Query resolvers
async def resolve_hotspot(info: strawberry.Info, movie_id: str, id: str) -> Hotspot | None:
    """Read a single hotspot through the realtime store."""
    try:
        path = hotspot_path(movie_id, id)
    except InvalidPathException:
        logger.info("Invalid hotspot path", movie_id=movie_id, hotspot_id=id)
        return None

    stores = get_store_clients_from_info(info)
    doc = await stores.store.get(path)
    if doc is None:
        logger.info("Hotspot not found", movie_id=movie_id, hotspot_id=id)
    return mapping.hotspot(doc, id)


# Mutation resolvers
async def add_hotspot(
    info: strawberry.Info, movie_id: str | None, data: dict[str, Any] | None
) -> Any:
    result = await get_gate_from_info(info).add_hotspot(movie_id, data)
    return to_payload(result, lambda doc: mapping.hotspot(doc))


async def edit_hotspot(
    info: strawberry.Info,
    movie_id: str | None,
    id: str | None,
    data: dict[str, Any] | None,
) -> Any:
    result = await get_gate_from_info(info).edit_hotspot(movie_id, id, data)
    return to_payload(result, lambda doc: mapping.hotspot(doc, id))


async def delete_hotspot(info: strawberry.Info, movie_id: str | None, id: str | None) -> Any:
    result = await get_gate_from_info(info).delete_hotspot(movie_id, id)
    return to_payload(result, lambda hotspot_id: DeletedHotspot(id=hotspot_id, movie_id=movie_id))

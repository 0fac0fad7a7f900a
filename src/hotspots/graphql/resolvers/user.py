from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ...documents import children_of
from ...logging import get_logger
from ...paths import USERS, user_path
from ...store.base import InvalidPathException
from .. import mapping
from ..context import get_gate_from_info, get_store_clients_from_info
from .outcomes import to_payload

if TYPE_CHECKING:
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_user(info: strawberry.Info, uid: str) -> User | None:
    """Fetch ``users/{uid}`` through the REST reader."""
    try:
        path = user_path(uid)
    except InvalidPathException:
        logger.info("Invalid user id", uid=uid)
        return None

    stores = get_store_clients_from_info(info)
    doc = await stores.reader.get(path)
    if doc is None:
        logger.info("User not found", uid=uid)
    return mapping.user_profile(doc, uid)


async def resolve_users(info: strawberry.Info) -> list[User]:
    stores = get_store_clients_from_info(info)
    docs = await stores.reader.get(USERS)
    users = (mapping.user_profile(doc, key) for key, doc in children_of(docs).items())
    return [user for user in users if user is not None]


# Mutation resolvers
async def create_user(info: strawberry.Info, data: dict[str, Any] | None) -> Any:
    result = await get_gate_from_info(info).create_user(data)
    return to_payload(result, lambda doc: mapping.user_profile(doc))

"""
Access to request-scoped collaborators from the GraphQL context
"""

import strawberry

from ..gate import MutationGate
from ..logging import get_logger
from ..store import StoreClients

logger = get_logger(__name__)


def get_store_clients_from_info(info: strawberry.Info) -> StoreClients:
    """Extract the store clients placed in the context by the router.

    Raises:
        RuntimeError: If the context was built without store clients
    """
    stores = info.context.get("stores")
    if stores is None:
        logger.error("Store clients not found in GraphQL context")
        raise RuntimeError("Store clients are not configured")
    return stores


def get_gate_from_info(info: strawberry.Info) -> MutationGate:
    gate = info.context.get("gate")
    if gate is None:
        gate = MutationGate(get_store_clients_from_info(info).store)
        info.context["gate"] = gate
    return gate

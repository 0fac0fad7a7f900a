"""
Translate gate results into GraphQL mutation payloads
"""

from collections.abc import Callable
from typing import Any

from ...gate import GateResult, GateStatus
from ..types.results import InvalidRequest, NotFound, StoreFailure


def to_payload(result: GateResult[Any], build: Callable[[Any], Any]) -> Any:
    """Return ``build(result.value)`` on success, otherwise the matching error type."""
    if result.status is GateStatus.OK:
        return build(result.value)
    if result.status is GateStatus.NOT_FOUND:
        return NotFound(message=result.message or "Not found", path=result.path or "")
    if result.status is GateStatus.STORE_ERROR:
        return StoreFailure(message=result.message or "Store operation failed")
    return InvalidRequest(message=result.message or "Invalid request")

"""
Helpers for preparing documents before they are written
"""

import uuid
from datetime import UTC, datetime
from typing import Any

from pydantic_core import to_jsonable_python


def new_id() -> str:
    """Generate an entity identifier."""
    return str(uuid.uuid4())


def timestamp(now: datetime | None = None) -> str:
    """Format a UTC timestamp as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = now or datetime.now(UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _drop_nulls(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _drop_nulls(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [_drop_nulls(item) for item in value]
    return value


def normalize_document(data: Any) -> Any:
    """Convert ``data`` to plain JSON values the way the store will persist it.

    Datetimes become ISO strings, tuples and sets become lists, and None members
    are dropped because the store does not keep null children.
    """
    jsonable = to_jsonable_python(
        data,
        fallback=str,
    )
    return _drop_nulls(jsonable)


def children_of(value: Any) -> dict[str, Any]:
    """Children of a node as a key -> value mapping.

    The store returns nodes whose keys are all small integers as lists; those
    are turned back into mappings with the missing indexes skipped.
    """
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, list):
        return {str(i): item for i, item in enumerate(value) if item is not None}
    return {}

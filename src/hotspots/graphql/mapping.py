"""
Adapters from raw store documents to GraphQL objects
"""

import math
from typing import Any

from ..documents import children_of
from .types.hotspot import Hotspot
from .types.movie import Movie
from .types.user import User


def _str(value: Any) -> str | None:
    if value is None or isinstance(value, dict | list):
        return None
    return str(value)


def _float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return result if math.isfinite(result) else None


def user_profile(doc: Any, uid: str | None = None) -> User | None:
    """Map a ``users/{uid}`` document.

    ``editedMovies`` is stored as a push-key map; it is flattened to the list
    of movie ids in key (insertion) order.
    """
    if not isinstance(doc, dict):
        return None

    edited = children_of(doc.get("editedMovies"))
    return User(
        uid=_str(doc.get("uid")) or uid or "",
        display_name=_str(doc.get("displayName")),
        email=_str(doc.get("email")),
        photo_url=_str(doc.get("photoURL")),
        edited_movies=[str(edited[key]) for key in sorted(edited) if edited[key] is not None],
        attributes=doc,
    )


def hotspot(doc: Any, id: str | None = None) -> Hotspot | None:
    if not isinstance(doc, dict):
        return None

    return Hotspot(
        id=_str(doc.get("id")) or id or "",
        title=_str(doc.get("title")),
        description=_str(doc.get("description")),
        start_time=_float(doc.get("startTime")),
        end_time=_float(doc.get("endTime")),
        x=_float(doc.get("x")),
        y=_float(doc.get("y")),
        url=_str(doc.get("url")),
        attributes=doc,
    )


def movie(doc: Any, id: str | None = None) -> Movie | None:
    """Map a ``movies/{id}`` document, including its nested hotspots."""
    if not isinstance(doc, dict):
        return None

    children = children_of(doc.get("hotspots"))
    hotspots = [hotspot(children[key], key) for key in sorted(children)]
    return Movie(
        id=_str(doc.get("id")) or id or "",
        title=_str(doc.get("title")),
        description=_str(doc.get("description")),
        video_url=_str(doc.get("videoUrl")),
        thumbnail_url=_str(doc.get("thumbnailUrl")),
        editor_id=_str(doc.get("editorId")),
        created_at=_str(doc.get("createdAt")),
        hotspots=[item for item in hotspots if item is not None],
        attributes=doc,
    )

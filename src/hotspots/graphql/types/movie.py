"""
Movie GraphQL type definitions
"""

import strawberry

from .hotspot import Hotspot


@strawberry.type
class Movie:
    """Movie type for GraphQL API."""

    id: str
    title: str | None
    description: str | None
    video_url: str | None
    thumbnail_url: str | None
    editor_id: str | None
    created_at: str | None
    hotspots: list[Hotspot]
    attributes: strawberry.scalars.JSON  # type: ignore[reportInvalidTypeForm]

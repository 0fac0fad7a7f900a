"""
Hotspot GraphQL type definitions
"""

import strawberry


@strawberry.type
class Hotspot:
    """Interactive region of a movie, active between two playback times."""

    id: str
    title: str | None
    description: str | None
    start_time: float | None
    end_time: float | None
    x: float | None
    y: float | None
    url: str | None
    attributes: strawberry.scalars.JSON  # type: ignore[reportInvalidTypeForm]

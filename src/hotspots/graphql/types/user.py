"""
User GraphQL type definitions
"""

import strawberry


@strawberry.type
class User:
    """User type for GraphQL API."""

    uid: str
    display_name: str | None
    email: str | None
    photo_url: str | None
    edited_movies: list[str]
    attributes: strawberry.scalars.JSON  # type: ignore[reportInvalidTypeForm]

"""
Root GraphQL query definitions
"""

import strawberry

from ..types.hotspot import Hotspot
from ..types.movie import Movie
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    # User queries
    @strawberry.field
    async def user(self, info: strawberry.Info, uid: str) -> User | None:
        """Get a user by uid."""
        from ..resolvers.user import resolve_user

        return await resolve_user(info, uid)

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """Get every user."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    # Movie queries
    @strawberry.field
    async def movie(self, info: strawberry.Info, id: str) -> Movie | None:
        """Get a movie by ID."""
        from ..resolvers.movie import resolve_movie

        return await resolve_movie(info, id)

    @strawberry.field
    async def movies(self, info: strawberry.Info) -> list[Movie]:
        """Get every movie."""
        from ..resolvers.movie import resolve_movies

        return await resolve_movies(info)

    # Hotspot queries
    @strawberry.field
    async def hotspot(self, info: strawberry.Info, movie_id: str, id: str) -> Hotspot | None:
        """Get a hotspot of a movie."""
        from ..resolvers.hotspot import resolve_hotspot

        return await resolve_hotspot(info, movie_id, id)

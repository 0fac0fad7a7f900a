"""
Root GraphQL mutation definitions

Payloads are loosely typed JSON objects and every argument is nullable:
presence is checked by the mutation gate, which reports it as InvalidRequest.
"""

import strawberry

from ..types.results import DeleteHotspotResult, HotspotResult, MovieResult, UserResult

JSON = strawberry.scalars.JSON


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(
        self,
        info: strawberry.Info,
        data: JSON | None = None,  # type: ignore[reportInvalidTypeForm]
    ) -> UserResult:
        """Create or overwrite a user. A uid is generated when none is given."""
        from ..resolvers.user import create_user

        return await create_user(info, data)

    # Movie mutations
    @strawberry.mutation(name="addMovie")
    async def add_movie(
        self,
        info: strawberry.Info,
        data: JSON | None = None,  # type: ignore[reportInvalidTypeForm]
    ) -> MovieResult:
        """Create a movie and add it to the editor's edited movies."""
        from ..resolvers.movie import add_movie

        return await add_movie(info, data)

    @strawberry.mutation(name="updateMovie")
    async def update_movie(
        self,
        info: strawberry.Info,
        id: str | None = None,
        data: JSON | None = None,  # type: ignore[reportInvalidTypeForm]
    ) -> MovieResult:
        """Replace an existing movie."""
        from ..resolvers.movie import update_movie

        return await update_movie(info, id, data)

    # Hotspot mutations
    @strawberry.mutation(name="addHotspot")
    async def add_hotspot(
        self,
        info: strawberry.Info,
        movie_id: str | None = None,
        data: JSON | None = None,  # type: ignore[reportInvalidTypeForm]
    ) -> HotspotResult:
        """Add a hotspot to an existing movie."""
        from ..resolvers.hotspot import add_hotspot

        return await add_hotspot(info, movie_id, data)

    @strawberry.mutation(name="editHotspot")
    async def edit_hotspot(
        self,
        info: strawberry.Info,
        movie_id: str | None = None,
        id: str | None = None,
        data: JSON | None = None,  # type: ignore[reportInvalidTypeForm]
    ) -> HotspotResult:
        """Replace an existing hotspot."""
        from ..resolvers.hotspot import edit_hotspot

        return await edit_hotspot(info, movie_id, id, data)

    @strawberry.mutation(name="deleteHotspot")
    async def delete_hotspot(
        self,
        info: strawberry.Info,
        movie_id: str | None = None,
        id: str | None = None,
    ) -> DeleteHotspotResult:
        """Remove a hotspot from a movie."""
        from ..resolvers.hotspot import delete_hotspot

        return await delete_hotspot(info, movie_id, id)

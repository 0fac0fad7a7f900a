"""Tests for GraphQL mutations executed against the in-memory store."""

import pytest

from hotspots.graphql.schema import schema

MOVIE_FIELDS = """
    __typename
    ... on Movie { id title editorId createdAt }
    ... on MutationError { message }
    ... on NotFound { path }
"""

HOTSPOT_FIELDS = """
    __typename
    ... on Hotspot { id title startTime }
    ... on MutationError { message }
    ... on NotFound { path }
"""


async def execute(query, clients, gate=None, **variables):
    context = {"stores": clients}
    if gate is not None:
        context["gate"] = gate
    return await schema.execute(query, variable_values=variables or None, context_value=context)


class TestCreateUserMutation:
    @pytest.mark.asyncio
    async def test_creates_user_with_generated_uid(self, seeded_clients, seeded_store):
        result = await execute(
            """
            mutation($data: JSON) {
              createUser(data: $data) {
                __typename
                ... on User { uid displayName }
              }
            }
            """,
            seeded_clients,
            data={"displayName": "Grace"},
        )

        assert result.errors is None
        payload = result.data["createUser"]
        assert payload["__typename"] == "User"
        assert payload["uid"]
        assert (await seeded_store.get(f"users/{payload['uid']}"))["displayName"] == "Grace"

    @pytest.mark.asyncio
    async def test_missing_data_is_invalid_request(self, seeded_clients):
        result = await execute(
            "mutation { createUser { __typename ... on MutationError { message } } }",
            seeded_clients,
        )

        assert result.data["createUser"] == {
            "__typename": "InvalidRequest",
            "message": "No data provided",
        }


class TestMovieMutations:
    @pytest.mark.asyncio
    async def test_add_movie(self, seeded_clients, seeded_gate, seeded_store):
        result = await execute(
            f"mutation($data: JSON) {{ addMovie(data: $data) {{ {MOVIE_FIELDS} }} }}",
            seeded_clients,
            seeded_gate,
            data={"title": "Trailer", "editorId": "editor-1"},
        )

        assert result.errors is None
        assert result.data["addMovie"] == {
            "__typename": "Movie",
            "id": "id-1",
            "title": "Trailer",
            "editorId": "editor-1",
            "createdAt": "2024-05-01T12:00:00.000Z",
        }
        edited = await seeded_store.get("users/editor-1/editedMovies")
        assert sorted(edited.values()) == ["id-1", "movie-1"]

    @pytest.mark.asyncio
    async def test_update_movie_round_trip(self, seeded_clients, seeded_store):
        result = await execute(
            f"""
            mutation($data: JSON) {{
              updateMovie(id: "movie-2", data: $data) {{ {MOVIE_FIELDS} }}
            }}
            """,
            seeded_clients,
            data={"title": "Renamed"},
        )

        assert result.data["updateMovie"]["__typename"] == "Movie"
        assert await seeded_store.get("movies/movie-2") == {"title": "Renamed", "id": "movie-2"}

    @pytest.mark.asyncio
    async def test_update_missing_movie_is_not_found(self, seeded_clients, seeded_store):
        before = seeded_store.snapshot()

        result = await execute(
            f"""
            mutation($data: JSON) {{
              updateMovie(id: "nope", data: $data) {{ {MOVIE_FIELDS} }}
            }}
            """,
            seeded_clients,
            data={"title": "T"},
        )

        assert result.data["updateMovie"] == {
            "__typename": "NotFound",
            "message": "Movie not found",
            "path": "movies/nope",
        }
        assert seeded_store.snapshot() == before

    @pytest.mark.asyncio
    async def test_update_without_id_is_invalid_request(self, seeded_clients):
        result = await execute(
            f'mutation {{ updateMovie(data: {{title: "T"}}) {{ {MOVIE_FIELDS} }} }}',
            seeded_clients,
        )

        assert result.data["updateMovie"] == {
            "__typename": "InvalidRequest",
            "message": "Invalid request",
        }


class TestHotspotMutations:
    @pytest.mark.asyncio
    async def test_add_hotspot(self, seeded_clients, seeded_gate, seeded_store):
        result = await execute(
            f"""
            mutation($data: JSON) {{
              addHotspot(movieId: "movie-1", data: $data) {{ {HOTSPOT_FIELDS} }}
            }}
            """,
            seeded_clients,
            seeded_gate,
            data={"title": "Lamp", "startTime": 4},
        )

        assert result.data["addHotspot"] == {
            "__typename": "Hotspot",
            "id": "id-1",
            "title": "Lamp",
            "startTime": 4.0,
        }
        assert await seeded_store.exists("movies/movie-1/hotspots/id-1")

    @pytest.mark.asyncio
    async def test_add_hotspot_to_missing_movie(self, seeded_clients):
        result = await execute(
            f"""
            mutation {{
              addHotspot(movieId: "nope", data: {{title: "T"}}) {{ {HOTSPOT_FIELDS} }}
            }}
            """,
            seeded_clients,
        )

        assert result.data["addHotspot"]["__typename"] == "NotFound"

    @pytest.mark.asyncio
    async def test_edit_hotspot(self, seeded_clients, seeded_store):
        result = await execute(
            f"""
            mutation {{
              editHotspot(movieId: "movie-1", id: "hs-2", data: {{title: "Shutter"}}) {{
                {HOTSPOT_FIELDS}
              }}
            }}
            """,
            seeded_clients,
        )

        assert result.data["editHotspot"]["title"] == "Shutter"
        assert await seeded_store.get("movies/movie-1/hotspots/hs-2") == {
            "title": "Shutter",
            "id": "hs-2",
        }

    @pytest.mark.asyncio
    async def test_delete_hotspot_twice(self, seeded_clients, seeded_store):
        query = """
            mutation {
              deleteHotspot(movieId: "movie-1", id: "hs-1") {
                __typename
                ... on DeletedHotspot { id movieId }
                ... on NotFound { path }
              }
            }
        """

        first = await execute(query, seeded_clients)
        second = await execute(query, seeded_clients)

        assert first.data["deleteHotspot"] == {
            "__typename": "DeletedHotspot",
            "id": "hs-1",
            "movieId": "movie-1",
        }
        assert second.data["deleteHotspot"] == {
            "__typename": "NotFound",
            "path": "movies/movie-1/hotspots/hs-1",
        }
        assert await seeded_store.exists("movies/movie-1/hotspots/hs-2")

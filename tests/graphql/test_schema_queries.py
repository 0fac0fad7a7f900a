"""Tests for GraphQL queries executed against the in-memory and REST readers."""

from unittest.mock import AsyncMock

import httpx
import pytest

from hotspots.graphql.schema import schema, validate_schema
from hotspots.store import InMemoryDocumentStore, StoreClients, StoreException
from hotspots.store.rest import RestDocumentReader


def rest_clients(payloads: dict, store: InMemoryDocumentStore) -> StoreClients:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payloads.get(request.url.path))

    reader = RestDocumentReader(
        "https://demo.firebaseio.com", transport=httpx.MockTransport(handler)
    )
    return StoreClients(reader=reader, store=store)


def test_schema_is_valid():
    validate_schema()


class TestUserQueries:
    @pytest.mark.asyncio
    async def test_user_by_uid(self, seeded_clients):
        result = await schema.execute(
            'query { user(uid: "editor-1") { uid displayName editedMovies } }',
            context_value={"stores": seeded_clients},
        )

        assert result.errors is None
        assert result.data["user"] == {
            "uid": "editor-1",
            "displayName": "Ada",
            "editedMovies": ["movie-1"],
        }

    @pytest.mark.asyncio
    async def test_missing_user_is_null(self, seeded_clients):
        result = await schema.execute(
            'query { user(uid: "nobody") { uid } }',
            context_value={"stores": seeded_clients},
        )

        assert result.errors is None
        assert result.data["user"] is None

    @pytest.mark.asyncio
    async def test_invalid_uid_is_null(self, seeded_clients):
        result = await schema.execute(
            'query { user(uid: "a/b") { uid } }',
            context_value={"stores": seeded_clients},
        )

        assert result.data["user"] is None

    @pytest.mark.asyncio
    async def test_users_lists_every_child(self, seeded_clients):
        result = await schema.execute(
            "query { users { uid email } }",
            context_value={"stores": seeded_clients},
        )

        assert result.data["users"] == [{"uid": "editor-1", "email": "ada@example.com"}]

    @pytest.mark.asyncio
    async def test_users_empty_collection(self):
        store = InMemoryDocumentStore()
        result = await schema.execute(
            "query { users { uid } }",
            context_value={"stores": StoreClients(reader=store, store=store)},
        )

        assert result.data["users"] == []

    @pytest.mark.asyncio
    async def test_users_stored_under_integer_keys(self):
        # The REST API returns an array when child keys are small integers
        clients = rest_clients(
            {"/users.json": [{"uid": "0", "displayName": "Ada"}, {"displayName": "Grace"}]},
            InMemoryDocumentStore(),
        )

        result = await schema.execute(
            "query { users { uid displayName } }", context_value={"stores": clients}
        )
        await clients.aclose()

        assert result.errors is None
        assert result.data["users"] == [
            {"uid": "0", "displayName": "Ada"},
            {"uid": "1", "displayName": "Grace"},
        ]

    @pytest.mark.asyncio
    async def test_users_array_skips_missing_indexes(self):
        clients = rest_clients({"/users.json": [None, {"uid": "1"}]}, InMemoryDocumentStore())

        result = await schema.execute("query { users { uid } }", context_value={"stores": clients})
        await clients.aclose()

        assert result.data["users"] == [{"uid": "1"}]


class TestMovieQueries:
    @pytest.mark.asyncio
    async def test_movie_with_hotspots(self, seeded_clients):
        result = await schema.execute(
            """
            query {
              movie(id: "movie-1") {
                id title editorId createdAt
                hotspots { id title startTime endTime }
              }
            }
            """,
            context_value={"stores": seeded_clients},
        )

        assert result.errors is None
        movie = result.data["movie"]
        assert movie["editorId"] == "editor-1"
        assert movie["hotspots"][0] == {
            "id": "hs-1",
            "title": "Door",
            "startTime": 1.5,
            "endTime": 3.0,
        }

    @pytest.mark.asyncio
    async def test_movies(self, seeded_clients):
        result = await schema.execute(
            "query { movies { id title } }",
            context_value={"stores": seeded_clients},
        )

        assert sorted(m["id"] for m in result.data["movies"]) == ["movie-1", "movie-2"]

    @pytest.mark.asyncio
    async def test_movies_stored_under_integer_keys(self):
        clients = rest_clients(
            {"/movies.json": [{"title": "Zero"}, {"id": "1", "title": "One"}]},
            InMemoryDocumentStore(),
        )

        result = await schema.execute(
            "query { movies { id title } }", context_value={"stores": clients}
        )
        await clients.aclose()

        assert result.data["movies"] == [
            {"id": "0", "title": "Zero"},
            {"id": "1", "title": "One"},
        ]

    @pytest.mark.asyncio
    async def test_read_failure_is_graphql_error(self, seeded_store):
        reader = AsyncMock(spec=InMemoryDocumentStore)
        reader.get.side_effect = StoreException("Read of movies failed with status 401")

        result = await schema.execute(
            "query { movies { id } }",
            context_value={"stores": StoreClients(reader=reader, store=seeded_store)},
        )

        assert result.errors
        assert "401" in result.errors[0].message


class TestHotspotQuery:
    @pytest.mark.asyncio
    async def test_hotspot(self, seeded_clients):
        result = await schema.execute(
            'query { hotspot(movieId: "movie-1", id: "hs-2") { id title x y } }',
            context_value={"stores": seeded_clients},
        )

        assert result.data["hotspot"] == {"id": "hs-2", "title": "Window", "x": 0.25, "y": 0.75}

    @pytest.mark.asyncio
    async def test_non_finite_coordinates_are_null(self):
        store = InMemoryDocumentStore(
            {"movies": {"m": {"hotspots": {"h": {"id": "h", "x": "nan"}}}}}
        )

        result = await schema.execute(
            'query { hotspot(movieId: "m", id: "h") { id x } }',
            context_value={"stores": StoreClients(reader=store, store=store)},
        )

        assert result.errors is None
        assert result.data["hotspot"] == {"id": "h", "x": None}

    @pytest.mark.asyncio
    async def test_missing_hotspot_is_null(self, seeded_clients):
        result = await schema.execute(
            'query { hotspot(movieId: "movie-1", id: "hs-9") { id } }',
            context_value={"stores": seeded_clients},
        )

        assert result.errors is None
        assert result.data["hotspot"] is None

    @pytest.mark.asyncio
    async def test_missing_store_context_is_error(self):
        result = await schema.execute(
            'query { hotspot(movieId: "movie-1", id: "hs-1") { id } }',
            context_value={},
        )

        assert result.errors

"""Tests for the indexes clients."""

from __future__ import annotations

import json
from typing import Any

import pytest

from meilirest.core.exceptions import MeiliSearchApiError
from meilirest.core.models import IndexMetadata
from meilirest.core.result import Failure, Success
from meilirest.core.types import HttpMethod
from meilirest.request import Request
from meilirest.resources import Index, Indexes


@pytest.fixture
def indexes(request_client: Request) -> Indexes:
    """Create an indexes client."""
    return Indexes(request_client)


# ============================================================================
# Collection Tests
# ============================================================================


class TestIndexesCollection:
    """Tests for /indexes."""

    async def test_create(self, indexes: Indexes, fake_transport, index_response: dict[str, Any]):
        """Creating should POST the uid and primary key."""
        fake_transport.respond("POST", "/indexes", json_body=index_response, status=201)

        result = await indexes.create("movies", primary_key="id")

        assert isinstance(result, Success)
        assert result.value.uid == "movies"
        assert json.loads(fake_transport.last_request.body) == {
            "uid": "movies",
            "primaryKey": "id",
        }

    async def test_create_without_primary_key(self, indexes: Indexes, fake_transport):
        """An unset primary key should not be sent."""
        fake_transport.respond("POST", "/indexes", json_body={"uid": "movies"}, status=201)

        await indexes.create("movies")

        assert json.loads(fake_transport.last_request.body) == {"uid": "movies"}

    async def test_get_all(self, indexes: Indexes, fake_transport, index_response: dict[str, Any]):
        """Listing should decode a list of index metadata."""
        fake_transport.respond(
            "GET",
            "/indexes",
            json_body=[index_response, {"uid": "books", "primaryKey": None}],
        )

        result = await indexes.get_all()

        assert isinstance(result, Success)
        assert [i.uid for i in result.value] == ["movies", "books"]
        assert all(isinstance(i, IndexMetadata) for i in result.value)

    async def test_get_or_create_creates(
        self,
        indexes: Indexes,
        fake_transport,
        index_response: dict[str, Any],
    ):
        """A new index should be created."""
        fake_transport.respond("POST", "/indexes", json_body=index_response, status=201)

        result = await indexes.get_or_create("movies")

        assert isinstance(result, Success)
        assert [r.method for r in fake_transport.requests] == [HttpMethod.POST]

    async def test_get_or_create_gets_existing(
        self,
        indexes: Indexes,
        fake_transport,
        index_response: dict[str, Any],
    ):
        """An existing index should be fetched."""
        fake_transport.respond(
            "POST",
            "/indexes",
            json_body={"message": "Index movies already exists", "code": "index_already_exists"},
            status=400,
        )
        fake_transport.respond("GET", "/indexes/movies", json_body=index_response)

        result = await indexes.get_or_create("movies")

        assert isinstance(result, Success)
        assert result.value.uid == "movies"
        assert [r.method for r in fake_transport.requests] == [HttpMethod.POST, HttpMethod.GET]

    async def test_get_or_create_other_error(self, indexes: Indexes, fake_transport):
        """Other creation errors should be forwarded."""
        fake_transport.respond(
            "POST",
            "/indexes",
            json_body={"message": "Invalid uid", "code": "invalid_index_uid"},
            status=400,
        )

        result = await indexes.get_or_create("bad uid")

        assert isinstance(result, Failure)
        assert isinstance(result.error, MeiliSearchApiError)
        assert len(fake_transport.requests) == 1


# ============================================================================
# Single Index Tests
# ============================================================================


class TestIndex:
    """Tests for /indexes/{uid}."""

    def test_index_makes_no_request(self, indexes: Indexes, fake_transport):
        """Getting a scoped client should not hit the server."""
        index = indexes.index("movies")

        assert isinstance(index, Index)
        assert index.uid == "movies"
        assert fake_transport.requests == []

    async def test_get(self, indexes: Indexes, fake_transport, index_response: dict[str, Any]):
        """Getting should decode the metadata."""
        fake_transport.respond("GET", "/indexes/movies", json_body=index_response)

        result = await indexes.index("movies").get()

        assert isinstance(result, Success)
        assert result.value.primary_key == "id"

    async def test_update(self, indexes: Indexes, fake_transport, index_response: dict[str, Any]):
        """Updating should PUT the primary key."""
        fake_transport.respond("PUT", "/indexes/movies", json_body=index_response)

        result = await indexes.index("movies").update("id")

        assert isinstance(result, Success)
        sent = fake_transport.last_request
        assert sent.method == HttpMethod.PUT
        assert json.loads(sent.body) == {"primaryKey": "id"}

    async def test_delete_empty_body(self, indexes: Indexes, fake_transport):
        """Deleting should succeed on an empty response."""
        fake_transport.respond("DELETE", "/indexes/movies", data=None, status=204)

        result = await indexes.index("movies").delete()

        assert result == Success(None)

    async def test_delete_not_found(self, indexes: Indexes, fake_transport):
        """Deleting a missing index should fail with an API error."""
        fake_transport.respond(
            "DELETE",
            "/indexes/movies",
            json_body={"message": "Index movies not found", "code": "index_not_found"},
            status=404,
        )

        result = await indexes.index("movies").delete()

        assert isinstance(result, Failure)
        assert result.error.code == "index_not_found"

    async def test_stats(
        self,
        indexes: Indexes,
        fake_transport,
        index_stats_response: dict[str, Any],
    ):
        """Index stats should be fetched from the scoped route."""
        fake_transport.respond("GET", "/indexes/movies/stats", json_body=index_stats_response)

        result = await indexes.index("movies").stats()

        assert isinstance(result, Success)
        assert result.value.number_of_documents == 19654

"""
Tests for the lazy MongoDB connection manager.
"""

import asyncio

import pytest

from core.database import MongoDB
from core.exceptions import DatabaseConnectionError, StoreError

from .fakes import FakeClientFactory


async def test_first_call_connects_and_opens_named_collections(
    database, client_factory, settings
):
    collections = await database.get_collections()

    assert len(client_factory.clients) == 1
    client = client_factory.clients[0]
    assert client.url == settings.db_url
    assert client.pings == 1
    assert collections.todos is client["todo_db"]["todos"]
    assert collections.projects is client["catalog_db"]["projects"]
    assert database.is_connected


async def test_later_calls_reuse_cached_handles(database, client_factory):
    first = await database.get_collections()
    second = await database.get_collections()

    assert first is second
    assert len(client_factory.clients) == 1
    assert client_factory.clients[0].pings == 1


async def test_concurrent_first_calls_create_one_client(database, client_factory):
    results = await asyncio.gather(*(database.get_collections() for _ in range(10)))

    assert len(client_factory.clients) == 1
    assert all(r is results[0] for r in results)


async def test_unreachable_server_raises_connection_error(settings):
    factory = FakeClientFactory(reachable=False)
    database = MongoDB(settings=settings, client_factory=factory)

    with pytest.raises(DatabaseConnectionError) as exc_info:
        await database.get_collections()

    assert isinstance(exc_info.value, StoreError)
    assert exc_info.value.status_code == 500
    assert factory.clients[0].closed
    assert not database.is_connected


async def test_failed_connection_can_be_retried(settings):
    factory = FakeClientFactory(reachable=False)
    database = MongoDB(settings=settings, client_factory=factory)

    with pytest.raises(DatabaseConnectionError):
        await database.get_collections()

    factory.reachable = True
    await database.get_collections()

    assert len(factory.clients) == 2
    assert database.is_connected


async def test_disconnect_closes_client(database, client_factory):
    await database.get_collections()
    await database.disconnect()

    assert client_factory.clients[0].closed
    assert not database.is_connected


async def test_disconnect_without_connection_is_noop(database, client_factory):
    await database.disconnect()
    assert client_factory.clients == []


async def test_health_check(database, client_factory):
    assert await database.health_check() is False

    await database.get_collections()
    assert await database.health_check() is True

    client_factory.clients[0].reachable = False
    assert await database.health_check() is False


async def test_timeouts_are_passed_to_client(database, client_factory, settings):
    await database.get_collections()

    options = client_factory.clients[0].options
    assert options["serverSelectionTimeoutMS"] == settings.mongodb_server_selection_timeout_ms
    assert options["connectTimeoutMS"] == settings.mongodb_connect_timeout_ms

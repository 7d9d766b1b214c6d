import asyncio

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from gamelearn.database import MongoStore
from gamelearn.main import create_app


@pytest_asyncio.fixture
async def store():
    """Connected store backed by an in-memory MongoDB per test."""
    store = MongoStore(db_name="gamelearn_test", client=AsyncMongoMockClient())
    await store.connect()
    yield store
    await store.close()


@pytest.fixture
def app_store():
    """Store for the HTTP app; seeded with asyncio.run before the client starts."""
    store = MongoStore(db_name="gamelearn_test", client=AsyncMongoMockClient())
    asyncio.run(store.connect())
    return store


@pytest.fixture
def client(app_store):
    app = create_app(store=app_store)
    with TestClient(app) as client:
        yield client

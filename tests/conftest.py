from unittest.mock import patch

import httpx
import mongomock
import pytest
from httpx import ASGITransport

from hotel_api.services.hotels import HotelService


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")
    monkeypatch.setenv("MONGODB_DATABASE", "hotel_reviews_test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")


@pytest.fixture
def db():
    client = mongomock.MongoClient(tz_aware=True)
    yield client["hotel_reviews_test"]
    client.close()


@pytest.fixture
def service(db):
    return HotelService(db)


@pytest.fixture
async def client(mock_env):
    from hotel_api.main import app, lifespan

    # In-memory MongoDB, discarded after each test
    with patch("hotel_api.main.MongoClient", mongomock.MongoClient):
        async with lifespan(app):
            async with httpx.AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://test",
            ) as c:
                yield c
            app.state.mongo_client.drop_database("hotel_reviews_test")

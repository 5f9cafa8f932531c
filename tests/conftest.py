"""Shared fixtures: an application wired to an in-memory MongoDB collection."""

import mongomock
import pytest

from app import create_app
from storage import SubmissionStore


@pytest.fixture
def collection():
    """Fresh in-memory collection per test."""
    return mongomock.MongoClient().portfolio_test.contacts


@pytest.fixture
def store(collection):
    return SubmissionStore(collection)


@pytest.fixture
def app(store):
    app = create_app('testing', store=store)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()

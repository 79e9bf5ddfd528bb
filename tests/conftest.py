import pytest
from fastapi.testclient import TestClient

from app.core.deps import get_store
from app.db.init_db import init_store
from app.main import app


@pytest.fixture()
def store():
    """A fresh seeded store for each test."""
    return init_store()


@pytest.fixture()
def client(store):
    """Test client whose GraphQL context uses the per-test store."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def gql(client):
    """Post a GraphQL document and return the parsed response body."""

    def _gql(query: str, **variables) -> dict:
        r = client.post("/graphql", json={"query": query, "variables": variables})
        assert r.status_code == 200, r.text
        return r.json()

    return _gql

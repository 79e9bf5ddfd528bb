from fastapi.testclient import TestClient

from app.main import app


def test_startup_serves_seeded_store_without_overrides():
    assert not app.dependency_overrides

    with TestClient(app) as c:
        r = c.post("/graphql", json={"query": "{ getAllStudents { id name } }"})

        assert r.status_code == 200, r.text
        assert r.json()["data"]["getAllStudents"] == [
            {"id": "1", "name": "Ahmed Hassan"},
            {"id": "2", "name": "Fatma Ali"},
        ]
        assert [s.id for s in app.state.store.students] == ["1", "2"]


def test_graphiql_page_is_served():
    with TestClient(app) as c:
        r = c.get("/graphql", headers={"Accept": "text/html"})

    assert r.status_code == 200
    assert "graphiql" in r.text.lower()

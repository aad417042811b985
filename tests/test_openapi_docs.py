from fastapi.testclient import TestClient
from app.main import app


client = TestClient(app)


def test_openapi_docs_contains_match_endpoints():
    response = client.get("/openapi.json")
    assert response.status_code == 200
    data = response.json()

    paths = data.get("paths", {})
    assert "post" in paths["/api/match"]
    assert "post" in paths["/api/reorder"]
    assert "get" in paths["/api/recipes"]
    assert "get" in paths["/api/recipes/{recipe_id}"]

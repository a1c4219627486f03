from ingredient_dedup.config import settings


def test_size_limit_middleware(client):
    """El middleware debe rechazar cuerpos que exceden el límite configurado."""
    big_body = "x" * (settings.max_body_bytes + 1)
    resp = client.post("/dedup/run", content=big_body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 413
    assert resp.json()["code"] == "payload_too_large"


def test_size_limit_allows_small_bodies(client):
    resp = client.post("/dedup/analyze", json=[])
    assert resp.status_code == 200
    assert resp.json()["totalUniqueIngredients"] == 0

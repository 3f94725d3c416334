import pytest

from passmeter.api import app
from passmeter.config import save_config

@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c

def test_home(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.get_json()["message"]

def test_score(client):
    resp = client.post("/score", json={"password": "password"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["score"] == 27
    assert data["label"] == "Weak"
    assert len(data["feedback"]) == 5

def test_score_missing_password_rejected(client):
    resp = client.post("/score", json={})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "password is required"

def test_score_empty_password(client):
    data = client.post("/score", json={"password": ""}).get_json()
    assert data["feedback"] == ["Password is empty."]

def test_score_rejects_bad_bodies(client):
    assert client.post("/score", data="nope", content_type="text/plain").status_code == 400
    assert client.post("/score", json=["password"]).status_code == 400
    assert client.post("/score", json={"password": 1234}).status_code == 400

def test_example_uses_config(client):
    assert client.get("/example").get_json()["password"] == "Correct Horse Battery Staple! 7"
    save_config({"example_password": "purple monkey dishwasher"})
    assert client.get("/example").get_json()["password"] == "purple monkey dishwasher"

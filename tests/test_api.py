import pytest

from passgauge.config import PatternConfig
from passgauge.web.api import create_app


@pytest.fixture
def client():
    return create_app().test_client()


def test_home(client):
    assert client.get("/").status_code == 200


def test_score(client):
    resp = client.post("/score", json={"password": "Gh7!kP2#wQ9z"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["label"] == "Strong"
    assert data["score"] == 4.0
    assert data["acceptable"] is True
    assert len(data["requirements"]) == 5
    assert "password" not in data


def test_score_empty_password(client):
    data = client.post("/score", json={"password": ""}).get_json()
    assert data["feedback"] == ["Password is required"]
    assert data["acceptable"] is False


@pytest.mark.parametrize("body", [{}, {"password": 123}, ["password"]])
def test_score_bad_request(client, body):
    resp = client.post("/score", json=body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_score_uses_injected_config():
    client = create_app(PatternConfig.build(common_passwords=["gh7!kp2#wq9z"])).test_client()
    data = client.post("/score", json={"password": "Gh7!kP2#wQ9z"}).get_json()
    assert data["label"] == "Weak"
    assert "This is a commonly used password" in data["feedback"]


def test_suggest(client):
    data = client.get("/suggest?count=3").get_json()
    assert len(data["suggestions"]) == 3
    assert client.get("/suggest").get_json()["suggestions"]


@pytest.mark.parametrize("count", ["0", "21", "abc", ""])
def test_suggest_bounds(client, count):
    assert client.get(f"/suggest?count={count}").status_code == 400


def test_requirements(client):
    data = client.get("/requirements").get_json()
    assert data["text"].startswith("Password must:")
    assert [r["optional"] for r in data["requirements"]] == [False, False, False, False, True]

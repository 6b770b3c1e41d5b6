# tests/test_api_smoke.py
import pytest
from fastapi.testclient import TestClient
from app.main import create_app

# Initialize the client once
app = create_app()
client = TestClient(app)

def _render_payload(person) -> dict:
    return {
        "template": "@I jumped with @my spear at ~user!",
        "user": {
            "person": person,
            "being": {"general_name": "rogue", "gender": "female", "specific_name": "Brunhilda"},
        },
        "target": {"person": 3, "being": {"general_name": "goblin", "gender": "male"}},
    }

def test_health_check():
    """
    Verifies the API is up and running.
    """
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"

@pytest.mark.parametrize(
    "person, expected",
    [
        (1, "I jumped with my spear at the goblin!"),
        (2, "You jumped with your spear at the goblin!"),
        (3, "She jumped with her spear at the goblin!"),
    ],
)
def test_render_endpoint(person, expected):
    response = client.post("/api/v1/render", json=_render_payload(person))
    assert response.status_code == 200
    body = response.json()
    assert body["text"] == expected
    assert body["template"] == "@I jumped with @my spear at ~user!"

def test_render_accepts_loose_gender_labels():
    payload = _render_payload(3)
    payload["user"]["being"]["gender"] = "f"
    response = client.post("/api/v1/render", json=payload)
    assert response.status_code == 200
    assert response.json()["text"] == "She jumped with her spear at the goblin!"

def test_render_rejects_bad_person():
    response = client.post("/api/v1/render", json=_render_payload(7))
    assert response.status_code == 422

def test_render_names_user_with_user_token():
    payload = _render_payload(3)
    payload["template"] = "@user jumped with @my spear at ~user!"
    response = client.post("/api/v1/render", json=payload)
    assert response.status_code == 200
    assert response.json()["text"] == "Brunhilda jumped with her spear at the goblin!"

def test_render_rejects_fractional_person():
    response = client.post("/api/v1/render", json=_render_payload(2.5))
    assert response.status_code == 422

def test_render_rejects_missing_general_name():
    payload = _render_payload(3)
    del payload["user"]["being"]["general_name"]
    response = client.post("/api/v1/render", json=payload)
    assert response.status_code == 422

def test_pronoun_cell_endpoint():
    response = client.get("/api/v1/pronouns/3/female")
    assert response.status_code == 200
    assert response.json() == {
        "I": "she", "me": "her", "my": "her", "mine": "hers", "myself": "herself", "was": "was",
    }

def test_pronoun_cell_rejects_unknown_gender():
    response = client.get("/api/v1/pronouns/3/robot")
    assert response.status_code == 422
    assert response.json()["status"] == "error"

# /tests/test_generations_router.py

import jwt
import pytest


@pytest.fixture
def saved_topic_id(client, make_user):
    _, headers = make_user("Topic Saver")
    response = client.post(
        "/api/topics/save",
        json={"title": "Mars Landing", "description": "Rover touches down", "traffic": "100K+"},
        headers=headers,
    )
    return response.json()["data"]["topicId"]


def _save_script(client, headers, topic_id, content="🎬 HOOK\nHello"):
    return client.post(
        "/api/generations/save",
        json={"type": "SCRIPT", "content": content, "topicId": topic_id},
        headers=headers,
    )


# --- Topics ---

def test_save_topic_is_idempotent_on_title(client, make_user):
    _, headers = make_user()
    payload = {"title": "Eclipse", "description": "Sky goes dark", "imageUrl": "https://img.example/e.jpg"}

    first = client.post("/api/topics/save", json=payload, headers=headers)
    second = client.post("/api/topics/save", json={**payload, "description": "Different"}, headers=headers)

    assert first.status_code == 201
    assert first.json()["message"] == "Topic saved successfully"
    assert second.status_code == 200
    assert second.json()["message"] == "Topic already exists"
    assert first.json()["data"]["topicId"] == second.json()["data"]["topicId"]
    assert second.json()["data"]["description"] == "Sky goes dark"
    assert second.json()["data"]["imageUrl"] == "https://img.example/e.jpg"


def test_save_topic_requires_title_and_description(client, make_user):
    _, headers = make_user()
    response = client.post("/api/topics/save", json={"title": "No description"}, headers=headers)
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Title and description are required"}


def test_save_topic_requires_auth(client):
    response = client.post("/api/topics/save", json={"title": "t", "description": "d"})
    assert response.status_code == 401
    assert response.json()["success"] is False


# --- Save + history ---

def test_save_generation_and_list_history(client, make_user, saved_topic_id):
    _, headers = make_user()
    first = _save_script(client, headers, saved_topic_id, content="first")
    second = client.post(
        "/api/generations/save",
        json={"type": "IMAGE", "content": "https://cdn.example/t.png", "imageMime": "image/png", "topicId": saved_topic_id},
        headers=headers,
    )

    assert first.status_code == 201
    assert first.json()["data"]["generationId"] == first.json()["data"]["id"]

    history = client.get("/api/generations/history", headers=headers)
    assert history.status_code == 200
    items = history.json()["data"]
    # Newest first.
    assert [item["id"] for item in items] == [second.json()["data"]["id"], first.json()["data"]["id"]]
    assert items[0]["topic"] == {"title": "Mars Landing", "imageUrl": None}


def test_history_only_lists_own_generations(client, make_user, saved_topic_id):
    _, headers_a = make_user("A")
    _, headers_b = make_user("B")
    _save_script(client, headers_a, saved_topic_id)

    assert len(client.get("/api/generations/history", headers=headers_a).json()["data"]) == 1
    assert client.get("/api/generations/history", headers=headers_b).json()["data"] == []


def test_save_generation_validation(client, make_user, saved_topic_id):
    _, headers = make_user()

    missing = client.post("/api/generations/save", json={"content": "x"}, headers=headers)
    assert missing.status_code == 400
    assert missing.json()["message"] == "Type and topicId are required"

    bad_type = client.post("/api/generations/save", json={"type": "PODCAST", "topicId": saved_topic_id}, headers=headers)
    assert bad_type.status_code == 400

    unknown_topic = client.post("/api/generations/save", json={"type": "SCRIPT", "topicId": "top_missing"}, headers=headers)
    assert unknown_topic.status_code == 404


# --- Ownership ---

def test_owner_can_read_and_delete(client, make_user, saved_topic_id):
    _, headers = make_user()
    generation_id = _save_script(client, headers, saved_topic_id).json()["data"]["id"]

    read = client.get(f"/api/generations/{generation_id}", headers=headers)
    assert read.status_code == 200
    assert read.json()["data"]["topic"]["title"] == "Mars Landing"
    assert read.json()["data"]["topic"]["traffic"] == "100K+"

    deleted = client.delete(f"/api/generations/{generation_id}", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json()["success"] is True

    assert client.get(f"/api/generations/{generation_id}", headers=headers).status_code == 404


def test_other_user_gets_403(client, make_user, saved_topic_id):
    _, owner_headers = make_user("Owner")
    _, intruder_headers = make_user("Intruder")
    generation_id = _save_script(client, owner_headers, saved_topic_id).json()["data"]["id"]

    read = client.get(f"/api/generations/{generation_id}", headers=intruder_headers)
    delete = client.delete(f"/api/generations/{generation_id}", headers=intruder_headers)

    assert read.status_code == 403
    assert delete.status_code == 403
    assert read.json() == {"success": False, "message": "Forbidden"}
    # The record survives the rejected delete.
    assert client.get(f"/api/generations/{generation_id}", headers=owner_headers).status_code == 200


def test_missing_generation_is_404(client, make_user):
    _, headers = make_user()
    assert client.get("/api/generations/gen_nope", headers=headers).status_code == 404
    assert client.delete("/api/generations/gen_nope", headers=headers).status_code == 404


@pytest.mark.parametrize("method, path", [
    ("get", "/api/generations/history"),
    ("get", "/api/generations/gen_x"),
    ("delete", "/api/generations/gen_x"),
    ("post", "/api/generations/save"),
])
def test_generation_routes_require_auth(client, method, path):
    response = getattr(client, method)(path, headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Unauthorized"}


def test_token_signed_with_another_key_cannot_read_owner_record(client, make_user, saved_topic_id):
    owner, owner_headers = make_user("Owner")
    generation_id = _save_script(client, owner_headers, saved_topic_id).json()["data"]["id"]
    forged = jwt.encode({"sub": owner.id}, "change-me-in-production", algorithm="HS256")

    response = client.get(f"/api/generations/{generation_id}", headers={"Authorization": f"Bearer {forged}"})

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Unauthorized"}

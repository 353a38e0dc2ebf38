"""Tests for tag CRUD."""
from datetime import datetime

from fastapi.testclient import TestClient


def test_create_requires_auth(client: TestClient):
    assert client.post("/tags", json={"name": "Bug"}).status_code == 401


def test_create_and_read_publicly(client: TestClient, agent):
    response = client.post("/tags", json={"name": "Bug"}, headers=agent.headers)
    assert response.status_code == 201
    tag = response.json()

    assert client.get(f"/tags/{tag['id']}").json()["name"] == "Bug"
    assert [t["name"] for t in client.get("/tags").json()] == ["Bug"]


def test_get_missing_tag(client: TestClient):
    assert client.get("/tags/42").status_code == 404


def test_update_renames_and_refreshes(client: TestClient, agent):
    tag = client.post("/tags", json={"name": "Bug"}, headers=agent.headers).json()

    response = client.put(f"/tags/{tag['id']}", json={"name": "Defect"}, headers=agent.headers)
    assert response.status_code == 200
    updated = response.json()
    assert updated["name"] == "Defect"
    assert datetime.fromisoformat(updated["updated_at"]) > datetime.fromisoformat(tag["updated_at"])


def test_update_without_name_is_bad_request(client: TestClient, agent):
    tag = client.post("/tags", json={"name": "Bug"}, headers=agent.headers).json()

    response = client.put(f"/tags/{tag['id']}", json={}, headers=agent.headers)
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BadRequestException"
    assert client.get(f"/tags/{tag['id']}").json()["name"] == "Bug"


def test_update_requires_auth(client: TestClient, agent):
    tag = client.post("/tags", json={"name": "Bug"}, headers=agent.headers).json()
    assert client.put(f"/tags/{tag['id']}", json={"name": "x"}).status_code == 401


def test_update_missing_tag(client: TestClient, agent):
    assert client.put("/tags/42", json={"name": "x"}, headers=agent.headers).status_code == 404


def test_any_authenticated_caller_may_mutate_any_tag(client: TestClient, agent, other_agent):
    tag = client.post("/tags", json={"name": "Bug"}, headers=agent.headers).json()
    response = client.put(f"/tags/{tag['id']}", json={"name": "Theirs"}, headers=other_agent.headers)
    assert response.status_code == 200
    assert client.delete(f"/tags/{tag['id']}", headers=other_agent.headers).status_code == 204


def test_delete(client: TestClient, agent):
    tag = client.post("/tags", json={"name": "Bug"}, headers=agent.headers).json()

    assert client.delete(f"/tags/{tag['id']}").status_code == 401
    assert client.delete(f"/tags/{tag['id']}", headers=agent.headers).status_code == 204
    assert client.get(f"/tags/{tag['id']}").status_code == 404
    assert client.delete(f"/tags/{tag['id']}", headers=agent.headers).status_code == 404


def test_out_of_range_tag_id_is_rejected(client: TestClient, agent):
    huge = "99999999999999999999"
    assert client.get(f"/tags/{huge}").status_code == 422
    assert client.put(f"/tags/{huge}", json={"name": "x"}, headers=agent.headers).status_code == 422
    assert client.delete(f"/tags/{huge}", headers=agent.headers).status_code == 422

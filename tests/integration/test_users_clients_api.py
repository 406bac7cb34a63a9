import uuid

import bcrypt
import pytest

from showroom.db.repositories import users as user_repo


def _create_user(client, username="jean.dupont", **extra):
    payload = {"username": username, "password": "password123", "displayName": "Jean Dupont", **extra}
    r = client.post("/api/users", json=payload)
    assert r.status_code == 201, r.text
    return r.json()


def test_user_responses_never_contain_password(client):
    created = _create_user(client, role="admin")
    assert "password" not in created
    assert created["role"] == "admin"

    listed = client.get("/api/users").json()
    assert all("password" not in user for user in listed)

    updated = client.patch(f"/api/users/{created['id']}", json={"password": "hacked", "displayName": "J. Dupont"})
    assert updated.status_code == 200
    assert "password" not in updated.json()
    assert updated.json()["displayName"] == "J. Dupont"

    assert "password" not in client.get(f"/api/users/{created['id']}").json()


def test_password_is_hashed_and_not_changed_by_patch(client, db):
    created = _create_user(client)
    client.patch(f"/api/users/{created['id']}", json={"password": "hacked"})

    db.expire_all()
    stored = user_repo.get_user_by_username(db, "jean.dupont")
    assert stored.password != "password123"
    assert bcrypt.checkpw(b"password123", stored.password.encode("utf-8"))
    assert not bcrypt.checkpw(b"hacked", stored.password.encode("utf-8"))


def test_default_role_is_seller(client):
    assert _create_user(client)["role"] == "seller"


def test_duplicate_username_is_a_conflict(client):
    _create_user(client)
    r = client.post("/api/users", json={"username": "jean.dupont", "password": "x"})
    assert r.status_code == 409
    assert r.json()["detail"]["field"] == "username"


def test_invalid_role_is_rejected(client):
    r = client.post("/api/users", json={"username": "x", "password": "y", "role": "owner"})
    assert r.status_code == 400


def test_users_listed_in_insertion_order(client):
    names = ["jean.dupont", "marie.martin", "pierre.durand"]
    for name in names:
        _create_user(client, username=name)
    assert [u["username"] for u in client.get("/api/users").json()] == names


def test_user_missing_and_delete(client):
    assert client.get(f"/api/users/{uuid.uuid4()}").status_code == 404
    assert client.patch(f"/api/users/{uuid.uuid4()}", json={"displayName": "x"}).status_code == 404
    user = _create_user(client)
    assert client.delete(f"/api/users/{user['id']}").status_code == 204
    assert client.delete(f"/api/users/{user['id']}").status_code == 204


def test_client_crud(client):
    r = client.post("/api/clients", json={"name": "Lucas Moreau", "email": "lucas.moreau@email.com", "smsConsent": True})
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["createdAt"] is not None

    fetched = client.get(f"/api/clients/{created['id']}").json()
    assert fetched["name"] == "Lucas Moreau"
    assert fetched["smsConsent"] is True
    assert fetched["phone"] is None

    r = client.patch(f"/api/clients/{created['id']}", json={"phone": "06 12 34 56 78"})
    assert r.json()["phone"] == "06 12 34 56 78"
    assert r.json()["email"] == "lucas.moreau@email.com"


def test_clients_listed_newest_first(client):
    first = client.post("/api/clients", json={"name": "Emma Leroy"}).json()
    second = client.post("/api/clients", json={"name": "Hugo Bernard"}).json()
    ids = [c["id"] for c in client.get("/api/clients").json()]
    assert ids.index(second["id"]) < ids.index(first["id"])


def test_clients_cannot_be_deleted(client):
    created = client.post("/api/clients", json={"name": "Chloé Dubois"}).json()
    r = client.delete(f"/api/clients/{created['id']}")
    assert r.status_code == 405


@pytest.mark.parametrize("path", ["/api/clients", "/api/users", "/api/emails"])
def test_malformed_id_is_a_validation_error(client, path):
    r = client.get(f"{path}/not-a-uuid")
    assert r.status_code == 400

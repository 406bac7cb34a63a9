import uuid
from datetime import datetime

from showroom.db import models


def _create(client, category="hours", key="monday", value="09:00 - 18:00", **extra):
    r = client.post("/api/knowledge", json={"category": category, "key": key, "value": value, **extra})
    assert r.status_code == 201, r.text
    return r.json()


def test_create_sets_updated_at(client):
    item = _create(client)
    assert item["updatedAt"] is not None
    assert item["updatedBy"] is None


def test_every_update_strictly_increases_updated_at(client):
    item = _create(client)
    stamps = [datetime.fromisoformat(item["updatedAt"])]
    for value in ("10:00 - 18:00", "10:00 - 18:00", "Fermé"):
        r = client.patch(f"/api/knowledge/{item['id']}", json={"value": value})
        assert r.status_code == 200
        stamps.append(datetime.fromisoformat(r.json()["updatedAt"]))
    assert all(later > earlier for earlier, later in zip(stamps, stamps[1:]))


def test_updated_at_increases_even_when_clock_stalls(client, monkeypatch):
    item = _create(client)
    frozen = datetime.fromisoformat(item["updatedAt"])
    monkeypatch.setattr(models, "now_utc", lambda: frozen)

    first = client.patch(f"/api/knowledge/{item['id']}", json={"value": "a"}).json()
    second = client.patch(f"/api/knowledge/{item['id']}", json={"value": "b"}).json()

    assert datetime.fromisoformat(first["updatedAt"]) > frozen
    assert datetime.fromisoformat(second["updatedAt"]) > datetime.fromisoformat(first["updatedAt"])


def test_empty_patch_still_touches_updated_at(client):
    item = _create(client)
    r = client.patch(f"/api/knowledge/{item['id']}", json={})
    assert r.status_code == 200
    assert datetime.fromisoformat(r.json()["updatedAt"]) > datetime.fromisoformat(item["updatedAt"])


def test_updated_by_is_recorded(client):
    item = _create(client)
    editor = str(uuid.uuid4())
    r = client.patch(f"/api/knowledge/{item['id']}", json={"value": "x", "updatedBy": editor})
    assert r.json()["updatedBy"] == editor


def test_filter_by_category(client):
    _create(client, category="hours", key="monday")
    _create(client, category="hours", key="tuesday")
    faq = _create(client, category="faq", key="warranty", value="12 mois")

    hours = client.get("/api/knowledge", params={"category": "hours"}).json()
    assert {i["key"] for i in hours} == {"monday", "tuesday"}
    assert [i["id"] for i in client.get("/api/knowledge", params={"category": "faq"}).json()] == [faq["id"]]
    assert client.get("/api/knowledge", params={"category": "pricing"}).json() == []
    assert len(client.get("/api/knowledge").json()) == 3


def test_missing_item_and_delete(client):
    assert client.get(f"/api/knowledge/{uuid.uuid4()}").status_code == 404
    assert client.patch(f"/api/knowledge/{uuid.uuid4()}", json={"value": "x"}).status_code == 404
    item = _create(client)
    assert client.delete(f"/api/knowledge/{item['id']}").status_code == 204
    assert client.delete(f"/api/knowledge/{item['id']}").status_code == 204


def test_null_value_is_rejected(client):
    item = _create(client)
    r = client.patch(f"/api/knowledge/{item['id']}", json={"value": None})
    assert r.status_code == 400

import pytest

from tests.integration.payloads import email_payload, vehicle_payload, waitlist_payload


@pytest.fixture
def create_email(client):
    def _create(**overrides):
        r = client.post("/api/emails", json=email_payload(**overrides))
        assert r.status_code == 201, r.text
        return r.json()
    return _create


@pytest.fixture
def create_vehicle(client):
    def _create(**overrides):
        r = client.post("/api/vehicles", json=vehicle_payload(**overrides))
        assert r.status_code == 201, r.text
        return r.json()
    return _create


@pytest.fixture
def create_waitlist_request(client):
    def _create(**overrides):
        r = client.post("/api/waitlist", json=waitlist_payload(**overrides))
        assert r.status_code == 201, r.text
        return r.json()
    return _create

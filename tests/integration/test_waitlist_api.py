import uuid
from datetime import datetime, timedelta, timezone

from tests.integration.payloads import waitlist_payload


def test_create_defaults(client):
    r = client.post("/api/waitlist", json=waitlist_payload())
    assert r.status_code == 201, r.text
    data = r.json()
    assert data["status"] == "waiting"
    assert data["priority"] == "medium"
    assert data["smsConsent"] is False
    assert data["lastContactedAt"] is None


def test_contacted_stamps_last_contacted_at(client, create_waitlist_request):
    request = create_waitlist_request()
    before = datetime.now(timezone.utc) - timedelta(seconds=1)
    r = client.patch(f"/api/waitlist/{request['id']}", json={"status": "contacted"})
    assert r.status_code == 200
    stamp = r.json()["lastContactedAt"]
    assert stamp is not None
    assert datetime.fromisoformat(stamp) >= before


def test_contacted_again_refreshes_timestamp(client, create_waitlist_request):
    request = create_waitlist_request()
    first = client.patch(f"/api/waitlist/{request['id']}", json={"status": "contacted"}).json()
    second = client.patch(f"/api/waitlist/{request['id']}", json={"status": "contacted"}).json()
    assert datetime.fromisoformat(second["lastContactedAt"]) >= datetime.fromisoformat(first["lastContactedAt"])


def test_other_updates_leave_last_contacted_at(client, create_waitlist_request):
    request = create_waitlist_request()
    contacted = client.patch(f"/api/waitlist/{request['id']}", json={"status": "contacted"}).json()

    r = client.patch(
        f"/api/waitlist/{request['id']}",
        json={"status": "converted", "contactHistory": "Vendu Model 3"},
    )
    data = r.json()
    assert data["status"] == "converted"
    assert data["contactHistory"] == "Vendu Model 3"
    assert data["lastContactedAt"] == contacted["lastContactedAt"]


def test_other_status_never_sets_last_contacted_at(client, create_waitlist_request):
    request = create_waitlist_request()
    r = client.patch(f"/api/waitlist/{request['id']}", json={"status": "inactive"})
    assert r.json()["lastContactedAt"] is None


def test_filter_by_status(client, create_waitlist_request):
    waiting = create_waitlist_request()
    create_waitlist_request(clientName="Julie Martin", status="converted")
    r = client.get("/api/waitlist", params={"status": "waiting"})
    assert [w["id"] for w in r.json()] == [waiting["id"]]
    assert client.get("/api/waitlist", params={"status": "lost"}).json() == []


def test_inverted_year_range_is_rejected(client):
    r = client.post("/api/waitlist", json=waitlist_payload(yearMin=2024, yearMax=2020))
    assert r.status_code == 400


def test_invalid_fuel_preference_is_rejected(client):
    r = client.post("/api/waitlist", json=waitlist_payload(fuelPreference="steam"))
    assert r.status_code == 400


def test_round_trip_matches_payload(client):
    payload = waitlist_payload(
        clientId=str(uuid.uuid4()),
        smsConsent=True,
        priority="high",
        modelPreference="Model Y",
        yearMax=2024,
        transmissionPreference="automatic",
        maxMileage=30000,
        colorPreference="Blanc",
        notes="Très intéressé",
    )
    created = client.post("/api/waitlist", json=payload).json()
    fetched = client.get(f"/api/waitlist/{created['id']}").json()
    for key, value in payload.items():
        assert fetched[key] == value, key


def test_missing_and_delete(client, create_waitlist_request):
    assert client.get(f"/api/waitlist/{uuid.uuid4()}").status_code == 404
    assert client.patch(f"/api/waitlist/{uuid.uuid4()}", json={"notes": "x"}).status_code == 404
    request = create_waitlist_request()
    assert client.delete(f"/api/waitlist/{request['id']}").status_code == 204
    assert client.delete(f"/api/waitlist/{request['id']}").status_code == 204


def test_patch_year_min_past_stored_year_max_is_rejected(client, create_waitlist_request):
    request = create_waitlist_request(yearMin=2020, yearMax=2022)

    r = client.patch(f"/api/waitlist/{request['id']}", json={"yearMin": 2030})
    assert r.status_code == 400
    assert r.json()["detail"][0]["field"] == "yearMin"

    fetched = client.get(f"/api/waitlist/{request['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["yearMin"] == 2020
    assert client.get("/api/waitlist").status_code == 200


def test_patch_year_max_below_stored_year_min_is_rejected(client, create_waitlist_request):
    request = create_waitlist_request(yearMin=2020, yearMax=2022)

    r = client.patch(f"/api/waitlist/{request['id']}", json={"yearMax": 2015, "notes": "budget serré"})
    assert r.status_code == 400
    assert r.json()["detail"][0]["field"] == "yearMax"

    fetched = client.get(f"/api/waitlist/{request['id']}").json()
    assert fetched["yearMax"] == 2022
    assert fetched["notes"] is None
    assert client.get("/api/waitlist").status_code == 200


def test_patch_moving_both_bounds_together_is_accepted(client, create_waitlist_request):
    request = create_waitlist_request(yearMin=2020, yearMax=2022)
    r = client.patch(f"/api/waitlist/{request['id']}", json={"yearMin": 2024, "yearMax": 2025})
    assert r.status_code == 200
    assert (r.json()["yearMin"], r.json()["yearMax"]) == (2024, 2025)


def test_clearing_a_bound_is_accepted(client, create_waitlist_request):
    request = create_waitlist_request(yearMin=2020, yearMax=2022)
    r = client.patch(f"/api/waitlist/{request['id']}", json={"yearMax": None})
    assert r.status_code == 200
    r = client.patch(f"/api/waitlist/{request['id']}", json={"yearMin": 2030})
    assert r.status_code == 200
    assert r.json()["yearMin"] == 2030

import logging

import bcrypt

from showroom.db import models, seed
from showroom.db.repositories import users as user_repo
from showroom.db.repositories.common import DuplicateRecordError
from showroom.utils.config import refresh_config_cache


def test_seed_demo_data_populates_every_table(db):
    counts = seed.seed_demo_data(db)
    assert counts == {
        "users": 4,
        "clients": 5,
        "vehicles": 6,
        "email_cases": 5,
        "waitlist_requests": 5,
        "knowledge_items": 20,
        "daily_stats": 7,
    }
    assert db.query(models.Vehicle).filter(models.Vehicle.reference == "BMW-X1-006").one().status == "sold"
    admin = user_repo.get_user_by_username(db, "jean.dupont")
    assert admin.role == "admin"
    assert bcrypt.checkpw(b"password123", admin.password.encode("utf-8"))


def test_seed_links_emails_to_clients_and_admin(db):
    seed.seed_demo_data(db)
    admin = user_repo.get_user_by_username(db, "jean.dupont")
    financing = db.query(models.EmailCase).filter(models.EmailCase.subject == "Question sur le financement").one()
    assert financing.assignee.id == admin.id
    assert financing.client.name == "Emma Leroy"


def test_seed_reset_replaces_rows(db):
    seed.seed_demo_data(db)
    seed.seed_demo_data(db, reset=True)
    assert db.query(models.User).count() == 4
    assert db.query(models.KnowledgeItem).count() == 20


def test_seed_password_from_env(db, monkeypatch):
    monkeypatch.setenv("SHOWROOM_SEED_PASSWORD", "demo-pass")
    refresh_config_cache()
    try:
        seed.seed_demo_data(db)
        user = user_repo.get_user_by_username(db, "marie.martin")
        assert bcrypt.checkpw(b"demo-pass", user.password.encode("utf-8"))
    finally:
        monkeypatch.delenv("SHOWROOM_SEED_PASSWORD")
        refresh_config_cache()


def test_main_without_reset_appends(db, monkeypatch, capsys):
    calls = []

    def _fake_seed(session, *, reset=True):
        calls.append(reset)
        return {"users": 0}

    monkeypatch.setattr(seed, "seed_demo_data", _fake_seed)
    monkeypatch.setattr(seed, "SessionLocal", lambda: db)

    assert seed.main(["--no-reset"]) == 0
    assert calls == [False]
    assert "Database seeded" in capsys.readouterr().out


def test_seed_without_reset_keeps_existing_users_and_vehicles(db):
    seed.seed_demo_data(db)
    counts = seed.seed_demo_data(db, reset=False)

    assert counts["users"] == 0
    assert counts["vehicles"] == 0
    assert counts["clients"] == 5
    assert db.query(models.User).count() == 4
    assert db.query(models.Vehicle).count() == 6
    assert db.query(models.Client).count() == 10
    admin = user_repo.get_user_by_username(db, "jean.dupont")
    financing = db.query(models.EmailCase).filter(models.EmailCase.subject == "Question sur le financement").all()
    assert len(financing) == 2
    assert {case.assigned_to for case in financing} == {admin.id}


def test_main_returns_non_zero_when_seeding_fails(db, monkeypatch, capsys, caplog):
    def _failing_seed(session, *, reset=True):
        raise DuplicateRecordError("Vehicle", "reference", "PEU-3008-001")

    monkeypatch.setattr(seed, "seed_demo_data", _failing_seed)
    monkeypatch.setattr(seed, "SessionLocal", lambda: db)

    with caplog.at_level(logging.ERROR, logger="showroom.scripts.seed"):
        assert seed.main(["--no-reset"]) == 1
    assert "Seeding failed" in capsys.readouterr().err
    assert any(record.exc_info for record in caplog.records)

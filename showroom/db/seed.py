"""Populate the database with a representative demo data set.

Usage::

    showroom-seed            # wipe every table, then insert the demo rows
    showroom-seed --no-reset # insert on top of what is already there
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from showroom.db import database, models, schemas
from showroom.db.models.base import now_utc
from showroom.db.repositories import (
    clients as client_repo,
    emails as email_repo,
    knowledge as knowledge_repo,
    stats as stats_repo,
    users as user_repo,
    vehicles as vehicle_repo,
    waitlist as waitlist_repo,
)
from showroom.db.repositories.common import DuplicateRecordError
from showroom.utils.config import seed_password


logger = logging.getLogger("showroom.scripts.seed")


# Access SessionLocal dynamically so test fixtures that rebind the
# sessionmaker are respected.
SessionLocal = lambda: database.SessionLocal()

# Deletion order is irrelevant (no foreign keys) but mirrors dependency order
_RESET_ORDER = (
    models.EmailCase,
    models.WaitlistRequest,
    models.Vehicle,
    models.KnowledgeItem,
    models.DailyStats,
    models.Client,
    models.User,
)

USERS = (
    ("jean.dupont", "Jean Dupont", "admin"),
    ("marie.martin", "Marie Martin", "seller"),
    ("pierre.durand", "Pierre Durand", "seller"),
    ("sophie.bernard", "Sophie Bernard", "readonly"),
)

CLIENTS = (
    {"name": "Lucas Moreau", "email": "lucas.moreau@email.com", "phone": "06 12 34 56 78", "smsConsent": True},
    {"name": "Emma Leroy", "email": "emma.leroy@email.com", "phone": "06 23 45 67 89", "smsConsent": True},
    {"name": "Hugo Bernard", "email": "hugo.bernard@email.com", "phone": "06 34 56 78 90", "smsConsent": False},
    {"name": "Chloé Dubois", "email": "chloe.dubois@email.com", "phone": "06 45 67 89 01", "smsConsent": True},
    {"name": "Gabriel Petit", "email": "gabriel.petit@email.com", "phone": "06 56 78 90 12", "smsConsent": False},
)

VEHICLES = (
    {
        "reference": "PEU-3008-001", "brand": "Peugeot", "model": "3008", "year": 2023,
        "fuel": "hybrid", "transmission": "automatic", "mileage": 15000, "price": 35900,
        "color": "Noir Perla", "status": "available", "aiUsable": True,
        "description": "SUV familial hybride rechargeable, excellente autonomie électrique",
    },
    {
        "reference": "REN-CLIO-002", "brand": "Renault", "model": "Clio", "year": 2022,
        "fuel": "gasoline", "transmission": "manual", "mileage": 28000, "price": 15500,
        "color": "Rouge Flamme", "status": "available", "aiUsable": True,
        "description": "Citadine économique et fiable, idéale pour la ville",
    },
    {
        "reference": "CIT-C3-003", "brand": "Citroën", "model": "C3", "year": 2021,
        "fuel": "diesel", "transmission": "manual", "mileage": 45000, "price": 12900,
        "color": "Blanc Banquise", "status": "available", "aiUsable": True,
        "description": "Confort de conduite exceptionnel, faible consommation",
    },
    {
        "reference": "TES-MOD3-004", "brand": "Tesla", "model": "Model 3", "year": 2023,
        "fuel": "electric", "transmission": "automatic", "mileage": 8000, "price": 42900,
        "color": "Bleu Nuit", "status": "reserved", "aiUsable": False,
        "description": "Berline électrique premium, autonomie 500km, autopilot inclus",
    },
    {
        "reference": "VW-GOLF-005", "brand": "Volkswagen", "model": "Golf", "year": 2022,
        "fuel": "gasoline", "transmission": "automatic", "mileage": 22000, "price": 24500,
        "color": "Gris Indium", "status": "available", "aiUsable": True,
        "description": "Compacte premium, finition R-Line, toit ouvrant",
    },
    {
        "reference": "BMW-X1-006", "brand": "BMW", "model": "X1", "year": 2021,
        "fuel": "diesel", "transmission": "automatic", "mileage": 55000, "price": 29900,
        "color": "Blanc Alpin", "status": "sold", "aiUsable": False,
        "description": "SUV compact premium, excellent état, historique complet",
    },
)

KNOWLEDGE = (
    ("hours", "monday", "09:00 - 18:00"),
    ("hours", "tuesday", "09:00 - 18:00"),
    ("hours", "wednesday", "09:00 - 18:00"),
    ("hours", "thursday", "09:00 - 18:00"),
    ("hours", "friday", "09:00 - 18:00"),
    ("hours", "saturday", "10:00 - 17:00"),
    ("hours", "sunday", "Fermé"),
    ("contact", "address", "123 Avenue des Voitures\n75001 Paris"),
    ("contact", "phone_sales", "01 23 45 67 89"),
    ("contact", "phone_service", "01 23 45 67 90"),
    ("contact", "email_sales", "vente@autoconcession.fr"),
    ("contact", "email_service", "sav@autoconcession.fr"),
    ("procedure", "test_drive", "Essai gratuit sur rendez-vous. Permis de conduire et pièce d'identité requis. Durée: 30 minutes minimum."),
    ("procedure", "trade_in", "Estimation gratuite de votre véhicule actuel. Apporter carte grise, carnet d'entretien et clés."),
    ("procedure", "financing", "Solutions de financement personnalisées. Crédit classique, LOA, LLD disponibles. Simulation gratuite."),
    ("ai_rules", "tone", "professional"),
    ("ai_rules", "signature", "L'équipe AutoConcession"),
    ("ai_rules", "human_cases", "Négociation de prix, réclamation, demande de reprise, question juridique"),
    ("faq", "payment_methods", "Nous acceptons les paiements par carte bancaire, virement, chèque et financement."),
    ("faq", "warranty", "Tous nos véhicules d'occasion bénéficient d'une garantie minimum de 12 mois."),
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the showroom database with demo data")
    parser.add_argument(
        "--no-reset",
        action="store_true",
        help="Keep existing rows instead of clearing every table first",
    )
    return parser.parse_args(argv)


def reset_tables(session: Session) -> None:
    for model in _RESET_ORDER:
        session.query(model).delete(synchronize_session=False)
    session.commit()


def _email_cases(clients, admin) -> list[dict]:
    lucas, emma, hugo, chloe = clients[0], clients[1], clients[2], clients[3]
    return [
        {
            "clientId": lucas.id,
            "subject": "Demande d'essai Peugeot 3008",
            "content": "Bonjour,\n\nJe suis intéressé par le Peugeot 3008 hybride que j'ai vu sur votre site. "
                       "Serait-il possible d'organiser un essai ce week-end ?\n\nMerci d'avance,\nLucas Moreau",
            "senderEmail": lucas.email,
            "senderName": lucas.name,
            "status": "new",
            "priority": "high",
            "aiReason": "Demande d'essai - nécessite planification",
            "needsHuman": True,
        },
        {
            "clientId": emma.id,
            "subject": "Question sur le financement",
            "content": "Bonjour,\n\nJe souhaiterais avoir plus d'informations sur les options de financement "
                       "disponibles pour l'achat d'un véhicule neuf ou d'occasion.\n\nPouvez-vous me contacter "
                       "pour en discuter ?\n\nCordialement,\nEmma Leroy",
            "senderEmail": emma.email,
            "senderName": emma.name,
            "status": "in_progress",
            "priority": "medium",
            "aiReason": "Question financière complexe",
            "needsHuman": True,
            "assignedTo": admin.id,
        },
        {
            "clientId": hugo.id,
            "subject": "Réclamation - Problème technique",
            "content": "Bonjour,\n\nJ'ai acheté un véhicule chez vous il y a 3 mois et je rencontre des problèmes "
                       "avec le système de navigation. Le GPS ne fonctionne plus correctement depuis la dernière "
                       "mise à jour.\n\nMerci de me recontacter rapidement.\n\nHugo Bernard",
            "senderEmail": hugo.email,
            "senderName": hugo.name,
            "status": "new",
            "priority": "high",
            "aiReason": "Réclamation client",
            "needsHuman": True,
        },
        {
            "clientId": chloe.id,
            "subject": "Estimation de reprise",
            "content": "Bonjour,\n\nJe possède une Renault Clio 2019 avec 45000 km et je souhaiterais la faire "
                       "reprendre pour l'achat d'un nouveau véhicule.\n\nPouvez-vous me donner une estimation ?"
                       "\n\nMerci,\nChloé Dubois",
            "senderEmail": chloe.email,
            "senderName": chloe.name,
            "status": "follow_up",
            "priority": "medium",
            "aiReason": "Demande de reprise véhicule",
            "needsHuman": True,
        },
        {
            "subject": "Disponibilité Tesla Model 3",
            "content": "Bonjour,\n\nAvez-vous des Tesla Model 3 disponibles actuellement ? Je recherche un modèle "
                       "récent avec moins de 30000 km.\n\nMerci pour votre retour.",
            "senderEmail": "prospect@email.com",
            "senderName": None,
            "status": "new",
            "priority": "low",
            "aiReason": "Question stock - véhicule spécifique indisponible",
            "needsHuman": True,
        },
    ]


def _waitlist_requests(clients) -> list[dict]:
    lucas, emma = clients[0], clients[1]
    return [
        {
            "clientId": lucas.id, "clientName": lucas.name, "phone": lucas.phone, "smsConsent": True,
            "status": "waiting", "priority": "high", "brandPreference": "Peugeot", "modelPreference": "3008",
            "yearMin": 2022, "fuelPreference": "hybrid", "transmissionPreference": "automatic",
            "maxBudget": 40000,
        },
        {
            "clientId": emma.id, "clientName": emma.name, "phone": emma.phone, "smsConsent": True,
            "status": "waiting", "priority": "medium", "brandPreference": "Renault", "modelPreference": "Captur",
            "yearMin": 2021, "fuelPreference": "gasoline", "maxMileage": 50000, "maxBudget": 20000,
        },
        {
            "clientName": "Thomas Petit", "phone": "06 78 90 12 34", "smsConsent": True,
            "status": "contacted", "priority": "high", "brandPreference": "Tesla", "yearMin": 2022,
            "fuelPreference": "electric", "maxBudget": 50000,
            "notes": "Très intéressé, rappeler cette semaine",
            "contactHistory": "15/01/2026 - Premier contact par téléphone, intéressé par Tesla Model 3 ou Y",
        },
        {
            "clientName": "Julie Martin", "phone": "06 89 01 23 45", "smsConsent": False,
            "status": "waiting", "priority": "low", "brandPreference": "Citroën", "modelPreference": "C3",
            "yearMax": 2023, "fuelPreference": "diesel", "maxMileage": 80000, "maxBudget": 15000,
            "colorPreference": "Blanc",
        },
        {
            "clientName": "Antoine Rousseau", "phone": "06 90 12 34 56", "smsConsent": True,
            "status": "converted", "priority": "medium", "brandPreference": "BMW", "modelPreference": "X1",
            "yearMin": 2020, "maxBudget": 35000,
            "contactHistory": "10/01/2026 - Vendu BMW X1 réf BMW-X1-006",
        },
    ]


def _daily_stats(today: datetime, days: int = 7) -> list[dict]:
    midnight = today.replace(hour=0, minute=0, second=0, microsecond=0)
    rows = []
    for offset in range(days):
        total_emails = 18 + (offset * 5) % 11
        ai_responses = total_emails * 3 // 5
        total_calls = 30 + (offset * 7) % 13
        ai_handled = total_calls * 4 // 5
        rows.append(
            {
                "date": midnight - timedelta(days=offset),
                "totalEmails": total_emails,
                "aiResponses": ai_responses,
                "humanEscalations": total_emails - ai_responses,
                "avgResponseTimeMinutes": 120 + offset * 4,
                "totalCalls": total_calls,
                "aiHandledCalls": ai_handled,
                "transferredCalls": total_calls - ai_handled,
                "avgCallDurationSeconds": 250 + offset * 6,
                "waitlistConversions": offset % 3,
            }
        )
    return rows


def _ensure_users(session: Session, password: str) -> tuple[list, int]:
    """Create the demo accounts that are missing; existing usernames are reused."""
    users, created = [], 0
    for username, display_name, role in USERS:
        user = user_repo.get_user_by_username(session, username)
        if user is None:
            user = user_repo.create_user(
                session,
                schemas.UserCreate(username=username, password=password, display_name=display_name, role=role),
            )
            created += 1
        users.append(user)
    return users, created


def _ensure_vehicles(session: Session) -> int:
    created = 0
    for payload in VEHICLES:
        if vehicle_repo.get_vehicle_by_reference(session, payload["reference"]) is not None:
            logger.info("Vehicle already present; skipping", extra={"reference": payload["reference"]})
            continue
        vehicle_repo.create_vehicle(session, schemas.VehicleCreate.model_validate(payload))
        created += 1
    return created


def seed_demo_data(session: Session, *, reset: bool = True) -> dict[str, int]:
    """Insert the demo data set through the repositories.

    Without ``reset`` the rows are added next to the existing ones; demo
    users and vehicles already present (matched by username / reference)
    are left as they are. Returns the number of rows created per table.
    """
    if reset:
        reset_tables(session)

    users, users_created = _ensure_users(session, seed_password())
    clients = [
        client_repo.create_client(session, schemas.ClientCreate.model_validate(payload))
        for payload in CLIENTS
    ]
    vehicles_created = _ensure_vehicles(session)
    email_cases = [
        email_repo.create_email_case(session, schemas.EmailCaseCreate.model_validate(payload))
        for payload in _email_cases(clients, admin=users[0])
    ]
    waitlist = [
        waitlist_repo.create_waitlist_request(session, schemas.WaitlistRequestCreate.model_validate(payload))
        for payload in _waitlist_requests(clients)
    ]
    knowledge = [
        knowledge_repo.create_knowledge_item(
            session, schemas.KnowledgeItemCreate(category=category, key=key, value=value)
        )
        for category, key, value in KNOWLEDGE
    ]
    daily_stats = [
        stats_repo.create_daily_stats(session, schemas.DailyStatsCreate.model_validate(payload))
        for payload in _daily_stats(now_utc())
    ]
    return {
        "users": users_created,
        "clients": len(clients),
        "vehicles": vehicles_created,
        "email_cases": len(email_cases),
        "waitlist_requests": len(waitlist),
        "knowledge_items": len(knowledge),
        "daily_stats": len(daily_stats),
    }


def run(reset: bool) -> int:
    session = SessionLocal()
    try:
        run_started = time.perf_counter()
        logger.info("Seeding database", extra={"reset": reset})
        try:
            counts = seed_demo_data(session, reset=reset)
        except (DuplicateRecordError, SQLAlchemyError):
            logger.exception("Seeding failed", extra={"reset": reset})
            print("Seeding failed; rows committed before the error are kept. Re-run without --no-reset to start clean.",
                  file=sys.stderr)
            return 1
        duration = time.perf_counter() - run_started
        print("Database seeded: " + ", ".join(f"{count} {table}" for table, count in counts.items()))
        logger.info(
            "Seeding finished",
            extra={**counts, "duration_seconds": round(duration, 3)},
        )
        return 0
    finally:
        session.close()


def main(argv: list[str] | None = None) -> int:
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)
    return run(reset=not args.no_reset)


if __name__ == "__main__":  # pragma: no cover - manual execution path
    sys.exit(main())

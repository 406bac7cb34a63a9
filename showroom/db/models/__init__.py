"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes so callers can keep
importing `showroom.db.models` as a single module.
"""

from .base import Base, now_utc  # re-export

# Domain models
from .users import User
from .clients import Client
from .emails import EmailCase
from .vehicles import Vehicle
from .waitlist import WaitlistRequest
from .knowledge import KnowledgeItem
from .stats import DailyStats

__all__ = [
    # base
    "Base",
    "now_utc",
    # people
    "User",
    "Client",
    # inbox
    "EmailCase",
    # inventory / waitlist
    "Vehicle",
    "WaitlistRequest",
    # knowledge base
    "KnowledgeItem",
    # statistics
    "DailyStats",
]

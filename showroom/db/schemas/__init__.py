"""
Domain-split Pydantic schemas.

Re-exports every request/response model so routers can use
`from showroom.db import schemas` and refer to `schemas.VehicleCreate` etc.
"""

from .base import SchemaBase, PatchSchema
from .users import UserBase, UserCreate, UserUpdate, User
from .clients import ClientBase, ClientCreate, ClientUpdate, Client
from .emails import EmailCaseBase, EmailCaseCreate, EmailCaseUpdate, EmailCase
from .vehicles import VehicleBase, VehicleCreate, VehicleUpdate, Vehicle
from .waitlist import (
    YEAR_RANGE_MESSAGE,
    year_range_is_ordered,
    WaitlistPreferences,
    WaitlistRequestBase,
    WaitlistRequestCreate,
    WaitlistRequestUpdate,
    WaitlistRequest,
)
from .knowledge import KnowledgeItemBase, KnowledgeItemCreate, KnowledgeItemUpdate, KnowledgeItem
from .stats import (
    DailyStatsBase,
    DailyStatsCreate,
    DailyStatsUpdate,
    DailyStats,
    EmailSummary,
    CallSummary,
    WaitlistSummary,
    StatisticsSummary,
)

__all__ = [
    "SchemaBase",
    "PatchSchema",
    # Users / clients
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "User",
    "ClientBase",
    "ClientCreate",
    "ClientUpdate",
    "Client",
    # Emails
    "EmailCaseBase",
    "EmailCaseCreate",
    "EmailCaseUpdate",
    "EmailCase",
    # Vehicles
    "VehicleBase",
    "VehicleCreate",
    "VehicleUpdate",
    "Vehicle",
    # Waitlist
    "YEAR_RANGE_MESSAGE",
    "year_range_is_ordered",
    "WaitlistPreferences",
    "WaitlistRequestBase",
    "WaitlistRequestCreate",
    "WaitlistRequestUpdate",
    "WaitlistRequest",
    # Knowledge
    "KnowledgeItemBase",
    "KnowledgeItemCreate",
    "KnowledgeItemUpdate",
    "KnowledgeItem",
    # Statistics
    "DailyStatsBase",
    "DailyStatsCreate",
    "DailyStatsUpdate",
    "DailyStats",
    "EmailSummary",
    "CallSummary",
    "WaitlistSummary",
    "StatisticsSummary",
]

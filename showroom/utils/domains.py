"""
Enumerated value domains.

Centralized definitions for every closed string domain stored by the
service (roles, statuses, priorities, fuel and transmission types) so that
schemas, models and check constraints share one source of truth.
"""

from enum import Enum
from typing import Type


class UserRole(str, Enum):
    """Dashboard roles."""
    admin = "admin"
    seller = "seller"
    readonly = "readonly"


class EmailStatus(str, Enum):
    """Lifecycle of an inbound email case."""
    new = "new"
    in_progress = "in_progress"
    replied = "replied"
    follow_up = "follow_up"


class Priority(str, Enum):
    """Priority shared by email cases and waitlist requests."""
    low = "low"
    medium = "medium"
    high = "high"


class WaitlistStatus(str, Enum):
    waiting = "waiting"
    contacted = "contacted"
    converted = "converted"
    inactive = "inactive"


class VehicleStatus(str, Enum):
    available = "available"
    reserved = "reserved"
    sold = "sold"


class FuelType(str, Enum):
    gasoline = "gasoline"
    diesel = "diesel"
    hybrid = "hybrid"
    electric = "electric"


class Transmission(str, Enum):
    manual = "manual"
    automatic = "automatic"


def check_in(column: str, enum_cls: Type[Enum]) -> str:
    """Build a SQL ``IN`` predicate for a CHECK constraint on ``column``."""
    values = ",".join(f"'{member.value}'" for member in enum_cls)
    return f"{column} in ({values})"


# Option lists handed to clients, in declaration order
OPTION_LISTS = {
    "emailStatus": [m.value for m in EmailStatus],
    "emailPriority": [m.value for m in Priority],
    "waitlistStatus": [m.value for m in WaitlistStatus],
    "vehicleStatus": [m.value for m in VehicleStatus],
    "fuelType": [m.value for m in FuelType],
    "transmission": [m.value for m in Transmission],
    "userRole": [m.value for m in UserRole],
}

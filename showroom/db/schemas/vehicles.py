import uuid
from datetime import datetime
from typing import ClassVar, FrozenSet, List
from pydantic import Field
from showroom.utils.domains import FuelType, Transmission, VehicleStatus
from .base import SchemaBase, PatchSchema


class VehicleBase(SchemaBase):
    reference: str = Field(min_length=1)
    brand: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: int
    fuel: FuelType
    transmission: Transmission
    mileage: int = Field(ge=0)
    price: int = Field(ge=0)
    color: str | None = None
    status: VehicleStatus = VehicleStatus.available
    ai_usable: bool | None = True
    description: str | None = None
    photos: List[str] | None = None
    internal_notes: str | None = None


class VehicleCreate(VehicleBase):
    pass


class VehicleUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset(
        {"reference", "brand", "model", "year", "fuel", "transmission", "mileage", "price", "status"}
    )

    reference: str | None = Field(default=None, min_length=1)
    brand: str | None = Field(default=None, min_length=1)
    model: str | None = Field(default=None, min_length=1)
    year: int | None = None
    fuel: FuelType | None = None
    transmission: Transmission | None = None
    mileage: int | None = Field(default=None, ge=0)
    price: int | None = Field(default=None, ge=0)
    color: str | None = None
    status: VehicleStatus | None = None
    ai_usable: bool | None = None
    description: str | None = None
    photos: List[str] | None = None
    internal_notes: str | None = None


class Vehicle(VehicleBase):
    id: uuid.UUID
    created_at: datetime | None = None

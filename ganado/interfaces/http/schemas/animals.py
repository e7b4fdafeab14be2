from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnimalBase(BaseModel):
    tag: str = Field(..., max_length=50)
    name: str | None = Field(default=None, max_length=100)
    birth_date: date
    sex: str = Field(..., description="H (female) or M (male)")
    breed: str | None = None
    status: str | None = None
    notes: str | None = Field(default=None, max_length=500)

    # Genealogy fields
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    birth_reproduction_id: UUID | None = None

    @field_validator("sex")
    @classmethod
    def normalize_sex(cls, v: str) -> str:
        return v.strip().upper()


class AnimalCreate(AnimalBase):
    pass


class AnimalUpdate(BaseModel):
    version: int
    tag: str | None = Field(default=None, max_length=50)
    name: str | None = Field(default=None, max_length=100)
    birth_date: date | None = None
    sex: str | None = None
    breed: str | None = None
    status: str | None = None
    notes: str | None = Field(default=None, max_length=500)

    # Genealogy fields
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    birth_reproduction_id: UUID | None = None


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tag: str
    name: str | None
    birth_date: date
    sex: str
    breed: str | None
    status: str | None
    notes: str | None = None

    # Genealogy fields
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    birth_reproduction_id: UUID | None = None

    # Derived
    category: str | None = None
    active: bool

    created_at: datetime
    updated_at: datetime
    version: int

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ReproductionCreate(BaseModel):
    dam_id: UUID
    sire_id: UUID | None = None
    mating_type: str | None = Field(default=None, max_length=50)
    service_date: date | None = None
    pregnancy_confirmed_date: date | None = None
    expected_birth_date: date | None = None
    actual_birth_date: date | None = None
    outcome: str | None = Field(
        default=None, max_length=50, description="Preñada, No preñada, Aborto"
    )
    notes: str | None = Field(default=None, max_length=500)


class ReproductionUpdate(BaseModel):
    dam_id: UUID | None = None
    sire_id: UUID | None = None
    mating_type: str | None = Field(default=None, max_length=50)
    service_date: date | None = None
    pregnancy_confirmed_date: date | None = None
    expected_birth_date: date | None = None
    actual_birth_date: date | None = None
    outcome: str | None = Field(default=None, max_length=50)
    notes: str | None = Field(default=None, max_length=500)


class ReproductionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    dam_id: UUID
    sire_id: UUID | None
    mating_type: str | None
    service_date: date | None
    pregnancy_confirmed_date: date | None
    expected_birth_date: date | None
    actual_birth_date: date | None
    outcome: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

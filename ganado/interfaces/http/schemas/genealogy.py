from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AnimalSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tag: str
    name: str | None
    birth_date: date
    sex: str
    status: str | None = None
    breed: str | None = None


class AncestorNodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    animal: AnimalSummaryResponse
    generation: int
    sire: AncestorNodeResponse | None = None
    dam: AncestorNodeResponse | None = None


class PedigreeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    animal: AnimalSummaryResponse
    depth: int
    generated_at: datetime
    ancestors: list[AncestorNodeResponse]


class ConsanguinityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    animal_id: UUID
    name: str | None
    coefficient: Decimal  # percentage, two decimals
    computed_at: datetime


AncestorNodeResponse.model_rebuild()

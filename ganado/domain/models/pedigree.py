from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

from ganado.domain.models.animal import Animal


@dataclass(slots=True, frozen=True)
class AnimalSummary:
    id: UUID
    tag: str
    name: str | None
    birth_date: date
    sex: str
    status: str | None = None
    breed: str | None = None

    @classmethod
    def from_animal(cls, animal: Animal) -> AnimalSummary:
        return cls(
            id=animal.id,
            tag=animal.tag,
            name=animal.name,
            birth_date=animal.birth_date,
            sex=animal.sex,
            status=animal.status,
            breed=animal.breed,
        )


@dataclass(slots=True)
class AncestorNode:
    animal: AnimalSummary
    generation: int
    sire: AncestorNode | None = None
    dam: AncestorNode | None = None


@dataclass(slots=True)
class PedigreeTree:
    animal: AnimalSummary
    depth: int
    ancestors: list[AncestorNode] = field(default_factory=list)
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(slots=True)
class ConsanguinityResult:
    animal_id: UUID
    name: str | None
    coefficient: Decimal
    computed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from ganado.application.errors import ValidationError
from ganado.application.interfaces.unit_of_work import UnitOfWork
from ganado.application.use_cases.animals import classify_animal
from ganado.domain.models.animal import Animal
from ganado.domain.value_objects.sex import Sex


@dataclass(slots=True)
class CreateAnimalInput:
    tag: str
    birth_date: date
    sex: str
    name: str | None = None
    breed: str | None = None
    status: str | None = None
    # Genealogy fields
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    birth_reproduction_id: UUID | None = None
    notes: str | None = None


def ensure_valid_sex(sex: str) -> str:
    normalized = Sex.normalize(sex)
    if normalized is None:
        raise ValidationError(
            "Invalid sex code",
            details={"sex": sex, "allowed": [member.value for member in Sex]},
        )
    return normalized.value


async def execute(uow: UnitOfWork, payload: CreateAnimalInput) -> Animal:
    animal = Animal.create(
        tag=payload.tag,
        birth_date=payload.birth_date,
        sex=ensure_valid_sex(payload.sex),
        name=payload.name,
        breed=payload.breed,
        status=payload.status,
        sire_id=payload.sire_id,
        dam_id=payload.dam_id,
        birth_reproduction_id=payload.birth_reproduction_id,
        notes=payload.notes,
    )
    created = await uow.animals.add(animal)

    created.category = await classify_animal.execute(uow, created)
    await uow.animals.set_category(created.id, created.category)
    await uow.commit()
    return created

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from ganado.application.errors import ValidationError
from ganado.application.interfaces.unit_of_work import UnitOfWork
from ganado.domain.models.reproduction import Reproduction
from ganado.domain.value_objects.sex import Sex


@dataclass(slots=True)
class RecordReproductionInput:
    dam_id: UUID
    sire_id: UUID | None = None
    mating_type: str | None = None
    service_date: date | None = None
    pregnancy_confirmed_date: date | None = None
    expected_birth_date: date | None = None
    actual_birth_date: date | None = None
    outcome: str | None = None
    notes: str | None = None


async def ensure_parent(uow: UnitOfWork, animal_id: UUID, sex: Sex, label: str) -> None:
    animal = await uow.animals.get(animal_id)
    if not animal or not animal.active or Sex.normalize(animal.sex) is not sex:
        raise ValidationError(
            f"{label} not found, inactive or wrong sex",
            details={"animal_id": str(animal_id)},
        )


async def execute(uow: UnitOfWork, payload: RecordReproductionInput) -> Reproduction:
    await ensure_parent(uow, payload.dam_id, Sex.FEMALE, "Dam")
    if payload.sire_id is not None:
        await ensure_parent(uow, payload.sire_id, Sex.MALE, "Sire")

    reproduction = Reproduction.create(
        dam_id=payload.dam_id,
        sire_id=payload.sire_id,
        mating_type=payload.mating_type,
        service_date=payload.service_date,
        pregnancy_confirmed_date=payload.pregnancy_confirmed_date,
        expected_birth_date=payload.expected_birth_date,
        actual_birth_date=payload.actual_birth_date,
        outcome=payload.outcome,
        notes=payload.notes,
    )
    created = await uow.reproductions.add(reproduction)
    await uow.commit()
    return created

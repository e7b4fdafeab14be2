from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any
from uuid import UUID

from ganado.application.errors import ConflictError, NotFound, ValidationError
from ganado.application.interfaces.unit_of_work import UnitOfWork
from ganado.application.use_cases.animals import classify_animal
from ganado.application.use_cases.animals.create_animal import ensure_valid_sex
from ganado.domain.models.animal import Animal

REQUIRED_FIELDS = frozenset({"tag", "birth_date", "sex"})
NULLABLE_FIELDS = frozenset(
    {
        "name",
        "breed",
        "status",
        "notes",
        # Genealogy fields, null clears the link
        "sire_id",
        "dam_id",
        "birth_reproduction_id",
    }
)


@dataclass(slots=True)
class UpdateAnimalInput:
    version: int
    # Only the fields the client sent; an explicit None clears a nullable field
    changes: dict[str, Any] = field(default_factory=dict)


def _clean_changes(changes: dict[str, Any]) -> dict[str, Any]:
    unknown = set(changes) - REQUIRED_FIELDS - NULLABLE_FIELDS
    if unknown:
        raise ValidationError("Unknown animal fields", details={"fields": sorted(unknown)})
    nulled = sorted(name for name in REQUIRED_FIELDS if name in changes and changes[name] is None)
    if nulled:
        raise ValidationError("Fields cannot be null", details={"fields": nulled})
    data = dict(changes)
    if "sex" in data:
        data["sex"] = ensure_valid_sex(data["sex"])
    return data


async def execute(uow: UnitOfWork, animal_id: UUID, payload: UpdateAnimalInput) -> Animal:
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    data = _clean_changes(payload.changes)
    existing = await uow.animals.get(animal_id)
    if not existing:
        raise NotFound("Animal not found")
    if replace(existing, **data).is_own_parent():
        raise ValidationError("An animal cannot be its own parent")

    # Version is checked and bumped even when no field changed
    updated = await uow.animals.update(animal_id, data=data, expected_version=payload.version)
    if not updated:
        raise ConflictError("Version mismatch while updating animal")

    # Refreshed on every write, changed fields or not
    updated.category = await classify_animal.execute(uow, updated)
    await uow.animals.set_category(updated.id, updated.category)
    await uow.commit()
    return updated

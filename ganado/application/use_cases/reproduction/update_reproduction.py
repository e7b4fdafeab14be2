from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from ganado.application.errors import NotFound, ValidationError
from ganado.application.interfaces.unit_of_work import UnitOfWork
from ganado.application.use_cases.reproduction.record_reproduction import ensure_parent
from ganado.domain.models.reproduction import Reproduction
from ganado.domain.value_objects.sex import Sex

UPDATABLE_FIELDS = frozenset(
    {
        "dam_id",
        "sire_id",
        "mating_type",
        "service_date",
        "pregnancy_confirmed_date",
        "expected_birth_date",
        "actual_birth_date",
        "outcome",
        "notes",
    }
)


@dataclass(slots=True)
class UpdateReproductionInput:
    # Only the fields the client sent; an explicit None clears the field
    changes: dict[str, Any] = field(default_factory=dict)


async def execute(
    uow: UnitOfWork,
    reproduction_id: UUID,
    payload: UpdateReproductionInput,
) -> Reproduction:
    """Record follow-up facts (confirmation, birth, outcome) on an existing event."""
    unknown = set(payload.changes) - UPDATABLE_FIELDS
    if unknown:
        raise ValidationError("Unknown reproduction fields", details={"fields": sorted(unknown)})
    if "dam_id" in payload.changes and payload.changes["dam_id"] is None:
        raise ValidationError("Dam cannot be removed from a reproduction event")

    existing = await uow.reproductions.get(reproduction_id)
    if not existing:
        raise NotFound("Reproduction not found")
    if not payload.changes:
        return existing

    if "dam_id" in payload.changes:
        await ensure_parent(uow, payload.changes["dam_id"], Sex.FEMALE, "Dam")
    if payload.changes.get("sire_id") is not None:
        await ensure_parent(uow, payload.changes["sire_id"], Sex.MALE, "Sire")

    updated = await uow.reproductions.update(reproduction_id, dict(payload.changes))
    if not updated:
        raise NotFound("Reproduction not found")
    await uow.commit()
    return updated

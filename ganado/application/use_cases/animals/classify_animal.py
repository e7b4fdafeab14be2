from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from ganado.application.interfaces.unit_of_work import UnitOfWork
from ganado.domain.models.animal import Animal
from ganado.domain.models.reproduction import Reproduction
from ganado.domain.services.life_stage import (
    classify_life_stage,
    find_last_birth,
    is_recent_birth,
)
from ganado.domain.value_objects.sex import Sex
from ganado.utils.datetime_tz import civil_date

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ScanResult:
    history: tuple[Reproduction, ...] = ()
    offspring_reproduction_ids: frozenset[UUID] = frozenset()
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def scan_reproductive_history(uow: UnitOfWork, animal: Animal, today: date) -> ScanResult:
    try:
        history = await uow.reproductions.list_for_dam(animal.id)
        offspring_ids: frozenset[UUID] = frozenset()
        last_birth = find_last_birth(history)
        # Offspring are only looked up for a recent birth
        if is_recent_birth(last_birth, today):
            if await uow.animals.list_offspring(last_birth.id):
                offspring_ids = frozenset({last_birth.id})
        return ScanResult(history=tuple(history), offspring_reproduction_ids=offspring_ids)
    except Exception as exc:  # noqa: BLE001
        return ScanResult(error=exc)


async def execute(
    uow: UnitOfWork,
    animal: Animal,
    today: date | datetime | None = None,
) -> str:
    """Compute the category for `animal`; never raises.

    On a lookup failure the previously stored category is returned so the
    write that triggered the classification is not blocked.
    """
    reference = civil_date(today)

    scan = ScanResult()
    if Sex.normalize(animal.sex) is Sex.FEMALE:
        scan = await scan_reproductive_history(uow, animal, reference)
        if not scan.ok:
            logger.error(
                "Error computing category for animal %s",
                animal.id,
                exc_info=scan.error,
            )
            return animal.category or ""

    category = classify_life_stage(
        animal,
        scan.history,
        reference,
        offspring_reproduction_ids=scan.offspring_reproduction_ids,
    )
    logger.debug("Animal %s classified as %r", animal.id, category)
    return category

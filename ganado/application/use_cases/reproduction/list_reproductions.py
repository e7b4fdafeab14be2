from __future__ import annotations

from uuid import UUID

from ganado.application.errors import NotFound
from ganado.application.interfaces.unit_of_work import UnitOfWork
from ganado.domain.models.reproduction import Reproduction


async def execute(uow: UnitOfWork, animal_id: UUID) -> list[Reproduction]:
    """Reproductive history of a dam, most recent birth first."""
    animal = await uow.animals.get(animal_id)
    if not animal:
        raise NotFound("Animal not found")
    return await uow.reproductions.list_for_dam(animal_id)

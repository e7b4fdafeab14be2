from __future__ import annotations

from uuid import UUID

from ganado.application.errors import NotFound
from ganado.application.interfaces.unit_of_work import UnitOfWork
from ganado.domain.models.reproduction import Reproduction


async def execute(uow: UnitOfWork, reproduction_id: UUID) -> Reproduction:
    reproduction = await uow.reproductions.get(reproduction_id)
    if not reproduction:
        raise NotFound("Reproduction not found")
    return reproduction

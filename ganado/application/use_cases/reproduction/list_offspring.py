from __future__ import annotations

from uuid import UUID

from ganado.application.errors import NotFound
from ganado.application.interfaces.unit_of_work import UnitOfWork
from ganado.domain.models.animal import Animal


async def execute(uow: UnitOfWork, reproduction_id: UUID) -> list[Animal]:
    reproduction = await uow.reproductions.get(reproduction_id)
    if not reproduction:
        raise NotFound(f"Reproduction {reproduction_id} not found")
    return await uow.animals.list_offspring(reproduction_id)

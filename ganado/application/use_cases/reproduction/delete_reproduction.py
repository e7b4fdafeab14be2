from __future__ import annotations

from uuid import UUID

from ganado.application.errors import NotFound
from ganado.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, reproduction_id: UUID) -> None:
    deleted = await uow.reproductions.delete(reproduction_id)
    if not deleted:
        raise NotFound("Reproduction not found")
    await uow.commit()

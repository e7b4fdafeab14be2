from __future__ import annotations

from uuid import UUID

from ganado.application.errors import NotFound
from ganado.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, animal_id: UUID) -> None:
    deactivated = await uow.animals.deactivate(animal_id)
    if not deactivated:
        raise NotFound("Animal not found or already inactive")
    await uow.commit()

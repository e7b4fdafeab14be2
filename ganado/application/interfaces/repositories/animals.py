from __future__ import annotations

from typing import Protocol
from uuid import UUID

from ganado.domain.models.animal import Animal


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, animal_id: UUID) -> Animal | None: ...

    async def list_offspring(self, reproduction_id: UUID) -> list[Animal]: ...

    async def update(
        self,
        animal_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Animal | None: ...

    async def set_category(self, animal_id: UUID, category: str) -> None: ...

    async def deactivate(self, animal_id: UUID) -> bool: ...

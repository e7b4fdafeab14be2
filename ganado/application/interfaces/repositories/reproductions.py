from __future__ import annotations

from typing import Protocol
from uuid import UUID

from ganado.domain.models.reproduction import Reproduction


class ReproductionsRepository(Protocol):
    async def add(self, reproduction: Reproduction) -> Reproduction: ...

    async def get(self, reproduction_id: UUID) -> Reproduction | None: ...

    async def list_for_dam(self, dam_id: UUID) -> list[Reproduction]: ...

    async def update(self, reproduction_id: UUID, data: dict) -> Reproduction | None: ...

    async def delete(self, reproduction_id: UUID) -> bool: ...

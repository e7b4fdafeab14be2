from __future__ import annotations

from typing import Protocol

from ganado.application.interfaces.repositories.animals import AnimalRepository
from ganado.application.interfaces.repositories.reproductions import ReproductionsRepository


class UnitOfWork(Protocol):
    animals: AnimalRepository
    reproductions: ReproductionsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

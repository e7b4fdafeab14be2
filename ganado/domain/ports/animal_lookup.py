from __future__ import annotations

from typing import Protocol
from uuid import UUID

from ganado.domain.models.animal import Animal


class AnimalLookup(Protocol):
    """Read-only access to the animal registry used by genealogy traversals."""

    async def get(self, animal_id: UUID) -> Animal | None: ...

from __future__ import annotations

from uuid import UUID

from ganado.domain.models.animal import Animal
from ganado.domain.models.pedigree import AncestorNode, AnimalSummary
from ganado.domain.ports.animal_lookup import AnimalLookup
from ganado.domain.services.consanguinity import AncestorCensus


class PedigreeWalker:
    """Depth-bounded expansion of sire/dam links.

    No memoisation: the same animal may legitimately show up at several
    positions, and the census relies on reaching it once per path. The
    generation bound is what guarantees termination on cyclic data.
    """

    def __init__(self, animals: AnimalLookup) -> None:
        self.animals = animals
        self.lookups = 0

    async def _find(self, animal_id: UUID) -> Animal | None:
        self.lookups += 1
        return await self.animals.get(animal_id)

    async def build_ancestor(
        self,
        animal_id: UUID | None,
        current_generation: int,
        max_generation: int,
    ) -> AncestorNode | None:
        if animal_id is None or current_generation >= max_generation:
            return None

        animal = await self._find(animal_id)
        if animal is None:
            # Unknown or foundation ancestor
            return None

        node = AncestorNode(
            animal=AnimalSummary.from_animal(animal),
            generation=current_generation,
        )
        node.sire = await self.build_ancestor(
            animal.sire_id, current_generation + 1, max_generation
        )
        node.dam = await self.build_ancestor(animal.dam_id, current_generation + 1, max_generation)
        return node

    async def count_ancestors(
        self,
        animal_id: UUID | None,
        generation: int,
        max_generation: int,
        census: AncestorCensus,
    ) -> None:
        """Record every id reachable within `max_generation` (inclusive) into `census`."""
        if animal_id is None or generation > max_generation:
            return

        census.record(animal_id, generation)

        animal = await self._find(animal_id)
        if animal is None:
            return

        await self.count_ancestors(animal.sire_id, generation + 1, max_generation, census)
        await self.count_ancestors(animal.dam_id, generation + 1, max_generation, census)

from __future__ import annotations

import logging
from uuid import UUID

from ganado.application.errors import AppError, ComputationFault, NotFound
from ganado.application.interfaces.unit_of_work import UnitOfWork
from ganado.domain.models.pedigree import ConsanguinityResult
from ganado.domain.services.consanguinity import (
    DEFAULT_MAX_GENERATION,
    AncestorCensus,
    score_census,
)
from ganado.domain.services.pedigree import PedigreeWalker

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    animal_id: UUID,
    max_generation: int = DEFAULT_MAX_GENERATION,
) -> ConsanguinityResult:
    try:
        animal = await uow.animals.get(animal_id)
        if animal is None or not animal.active:
            raise NotFound("Animal not found or inactive")

        census = AncestorCensus()
        walker = PedigreeWalker(uow.animals)
        await walker.count_ancestors(animal.id, 0, max_generation, census)
        coefficient = score_census(census)
    except AppError:
        raise
    except Exception as exc:
        raise ComputationFault(
            "Error computing consanguinity coefficient",
            details={"animal_id": str(animal_id)},
        ) from exc
    logger.debug(
        "Consanguinity for %s is %s%% after %d lookups", animal_id, coefficient, walker.lookups
    )
    return ConsanguinityResult(animal_id=animal.id, name=animal.name, coefficient=coefficient)

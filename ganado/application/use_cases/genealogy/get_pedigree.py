from __future__ import annotations

import logging
from uuid import UUID

from ganado.application.errors import AppError, ComputationFault, InvalidDepth, NotFound
from ganado.application.interfaces.unit_of_work import UnitOfWork
from ganado.domain.models.pedigree import AnimalSummary, PedigreeTree
from ganado.domain.services.pedigree import PedigreeWalker

logger = logging.getLogger(__name__)

MIN_DEPTH = 1
MAX_DEPTH = 5
DEFAULT_DEPTH = 3


def ensure_valid_depth(depth: int) -> None:
    if depth < MIN_DEPTH or depth > MAX_DEPTH:
        raise InvalidDepth(
            f"Depth must be between {MIN_DEPTH} and {MAX_DEPTH}",
            details={"depth": depth},
        )


async def execute(uow: UnitOfWork, animal_id: UUID, depth: int = DEFAULT_DEPTH) -> PedigreeTree:
    ensure_valid_depth(depth)
    try:
        animal = await uow.animals.get(animal_id)
        if animal is None or not animal.active:
            raise NotFound("Animal not found or inactive")

        walker = PedigreeWalker(uow.animals)
        tree = PedigreeTree(animal=AnimalSummary.from_animal(animal), depth=depth)
        # Ancestors start one generation below the subject
        for parent_id in (animal.sire_id, animal.dam_id):
            node = await walker.build_ancestor(parent_id, 1, depth)
            if node is not None:
                tree.ancestors.append(node)
    except AppError:
        raise
    except Exception as exc:
        raise ComputationFault(
            "Error building pedigree", details={"animal_id": str(animal_id)}
        ) from exc
    logger.debug("Pedigree for %s built with %d lookups", animal_id, walker.lookups)
    return tree

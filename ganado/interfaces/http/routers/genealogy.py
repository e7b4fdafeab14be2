from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from ganado.application.use_cases.genealogy import get_consanguinity, get_pedigree
from ganado.config.settings import Settings
from ganado.interfaces.http.deps import get_app_settings, get_uow
from ganado.interfaces.http.schemas.genealogy import ConsanguinityResponse, PedigreeResponse

router = APIRouter(prefix="/genealogy", tags=["genealogy"])


@router.get("/{animal_id}/pedigree", response_model=PedigreeResponse)
async def get_pedigree_endpoint(
    animal_id: UUID,
    depth: int | None = Query(None, description="Generations to include (1-5)"),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> PedigreeResponse:
    # 1-5 range enforced by the use case (InvalidDepth)
    tree = await get_pedigree.execute(
        uow,
        animal_id,
        depth if depth is not None else settings.pedigree_default_depth,
    )
    return PedigreeResponse.model_validate(tree)


@router.get("/{animal_id}/consanguinity", response_model=ConsanguinityResponse)
async def get_consanguinity_endpoint(
    animal_id: UUID,
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> ConsanguinityResponse:
    result = await get_consanguinity.execute(
        uow, animal_id, max_generation=settings.consanguinity_max_generation
    )
    return ConsanguinityResponse.model_validate(result)

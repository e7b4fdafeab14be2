from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from ganado.application.use_cases.animals import (
    create_animal,
    deactivate_animal,
    get_animal,
    update_animal,
)
from ganado.interfaces.http.deps import get_uow
from ganado.interfaces.http.schemas.animals import AnimalCreate, AnimalResponse, AnimalUpdate

router = APIRouter(prefix="/animals", tags=["animals"])


@router.post("/", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal_endpoint(
    payload: AnimalCreate,
    uow=Depends(get_uow),
) -> AnimalResponse:
    result = await create_animal.execute(
        uow,
        create_animal.CreateAnimalInput(
            tag=payload.tag,
            birth_date=payload.birth_date,
            sex=payload.sex,
            name=payload.name,
            breed=payload.breed,
            status=payload.status,
            sire_id=payload.sire_id,
            dam_id=payload.dam_id,
            birth_reproduction_id=payload.birth_reproduction_id,
            notes=payload.notes,
        ),
    )
    return AnimalResponse.model_validate(result)


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal_endpoint(
    animal_id: UUID,
    uow=Depends(get_uow),
) -> AnimalResponse:
    result = await get_animal.execute(uow, animal_id)
    return AnimalResponse.model_validate(result)


@router.put("/{animal_id}", response_model=AnimalResponse)
async def update_animal_endpoint(
    animal_id: UUID,
    payload: AnimalUpdate,
    uow=Depends(get_uow),
) -> AnimalResponse:
    result = await update_animal.execute(
        uow,
        animal_id,
        update_animal.UpdateAnimalInput(
            version=payload.version,
            changes=payload.model_dump(exclude_unset=True, exclude={"version"}),
        ),
    )
    return AnimalResponse.model_validate(result)


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def deactivate_animal_endpoint(
    animal_id: UUID,
    uow=Depends(get_uow),
) -> Response:
    """Soft delete: the record stays available to genealogy walks."""
    await deactivate_animal.execute(uow, animal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

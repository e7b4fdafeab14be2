from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from ganado.application.use_cases.reproduction import (
    delete_reproduction,
    get_reproduction,
    list_offspring,
    list_reproductions,
    record_reproduction,
    update_reproduction,
)
from ganado.interfaces.http.deps import get_uow
from ganado.interfaces.http.schemas.animals import AnimalResponse
from ganado.interfaces.http.schemas.reproductions import (
    ReproductionCreate,
    ReproductionResponse,
    ReproductionUpdate,
)

router = APIRouter(prefix="/reproductions", tags=["reproductions"])


@router.post("/", response_model=ReproductionResponse, status_code=status.HTTP_201_CREATED)
async def record_reproduction_endpoint(
    payload: ReproductionCreate,
    uow=Depends(get_uow),
) -> ReproductionResponse:
    result = await record_reproduction.execute(
        uow,
        record_reproduction.RecordReproductionInput(**payload.model_dump()),
    )
    return ReproductionResponse.model_validate(result)


@router.get("/animal/{animal_id}", response_model=list[ReproductionResponse])
async def list_reproductions_endpoint(
    animal_id: UUID,
    uow=Depends(get_uow),
) -> list[ReproductionResponse]:
    items = await list_reproductions.execute(uow, animal_id)
    return [ReproductionResponse.model_validate(item) for item in items]


@router.get("/{reproduction_id}", response_model=ReproductionResponse)
async def get_reproduction_endpoint(
    reproduction_id: UUID,
    uow=Depends(get_uow),
) -> ReproductionResponse:
    result = await get_reproduction.execute(uow, reproduction_id)
    return ReproductionResponse.model_validate(result)


@router.put("/{reproduction_id}", response_model=ReproductionResponse)
async def update_reproduction_endpoint(
    reproduction_id: UUID,
    payload: ReproductionUpdate,
    uow=Depends(get_uow),
) -> ReproductionResponse:
    result = await update_reproduction.execute(
        uow,
        reproduction_id,
        update_reproduction.UpdateReproductionInput(
            changes=payload.model_dump(exclude_unset=True),
        ),
    )
    return ReproductionResponse.model_validate(result)


@router.delete("/{reproduction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reproduction_endpoint(
    reproduction_id: UUID,
    uow=Depends(get_uow),
) -> Response:
    await delete_reproduction.execute(uow, reproduction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{reproduction_id}/offspring", response_model=list[AnimalResponse])
async def list_offspring_endpoint(
    reproduction_id: UUID,
    uow=Depends(get_uow),
) -> list[AnimalResponse]:
    """Animals registered as born from the given reproduction event."""
    items = await list_offspring.execute(uow, reproduction_id)
    return [AnimalResponse.model_validate(item) for item in items]

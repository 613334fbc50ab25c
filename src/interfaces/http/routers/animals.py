from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.application.use_cases.animals import (
    create_animal,
    delete_animal,
    get_animal,
    list_animals,
    update_animal,
)
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.animals import (
    AnimalCreate,
    AnimalResponse,
    AnimalsListResponse,
    AnimalUpdate,
)

router = APIRouter(prefix="/animals", tags=["animals"])


@router.get("/", response_model=AnimalsListResponse)
async def list_animals_endpoint(
    limit: int | None = Query(None, ge=1, le=list_animals.MAX_LIMIT),
    offset: int | None = Query(None, ge=0),
    uow=Depends(get_uow),
) -> AnimalsListResponse:
    result = await list_animals.execute(uow, limit=limit, offset=offset)
    items = [AnimalResponse.model_validate(item) for item in result.items]
    return AnimalsListResponse(items=items, total=result.total)


@router.post("/", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal_endpoint(
    payload: AnimalCreate,
    uow=Depends(get_uow),
) -> AnimalResponse:
    result = await create_animal.execute(
        uow,
        create_animal.CreateAnimalInput(
            id=payload.id,
            name=payload.name,
            weight=payload.weight,
            diet=payload.diet,
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
            name=payload.name,
            weight=payload.weight,
            diet=payload.diet,
        ),
    )
    return AnimalResponse.model_validate(result)


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal_endpoint(
    animal_id: UUID,
    uow=Depends(get_uow),
) -> Response:
    await delete_animal.execute(uow, animal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

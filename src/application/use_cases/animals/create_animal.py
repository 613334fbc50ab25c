from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateAnimalInput:
    name: str
    weight: int
    diet: str
    id: UUID | None = None


async def execute(uow: UnitOfWork, payload: CreateAnimalInput) -> Animal:
    animal = Animal.create(
        id=payload.id,
        name=payload.name,
        weight=payload.weight,
        diet=payload.diet,
    )
    created = await uow.animals.add(animal)
    await uow.commit()
    logger.info("Animal created: %s", created.id)
    return created

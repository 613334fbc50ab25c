from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateAnimalInput:
    name: str
    weight: int
    diet: str


async def execute(uow: UnitOfWork, animal_id: UUID, payload: UpdateAnimalInput) -> Animal:
    # The id is immutable; the other fields are replaced as a whole
    updated = await uow.animals.update(animal_id, data=asdict(payload))
    if not updated:
        raise NotFound("Animal not found")
    await uow.commit()
    logger.info("Animal updated: %s", animal_id)
    return updated

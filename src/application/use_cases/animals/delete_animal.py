from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, animal_id: UUID) -> None:
    deleted = await uow.animals.delete(animal_id)
    if not deleted:
        raise NotFound("Animal not found")
    await uow.commit()
    logger.info("Animal deleted: %s", animal_id)

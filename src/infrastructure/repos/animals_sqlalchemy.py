from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import AppError, ConflictError, InfrastructureError, ValidationError
from src.application.interfaces.repositories.animals import AnimalRepository
from src.domain.models.animal import Animal
from src.infrastructure.db.orm.animal import AnimalORM

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
NOT_NULL_VIOLATION = "23502"


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def translate_integrity_error(exc: IntegrityError) -> AppError:
    """Map a constraint violation raised by the driver to an application error.

    asyncpg exposes the SQLSTATE; SQLite only has the message text.
    """
    state = _sqlstate(exc)
    text = str(exc.orig).lower()
    if state == NOT_NULL_VIOLATION or "not null" in text:
        return ValidationError("Animal is missing a required field")
    if state == UNIQUE_VIOLATION or "unique" in text or "duplicate key" in text:
        return ConflictError("Animal id already exists")
    logger.error("Unclassified integrity error on animals: %s", exc.orig)
    return InfrastructureError("Failed to store animal")


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            name=orm.name,
            weight=orm.weight,
            diet=orm.diet,
        )

    async def add(self, animal: Animal) -> Animal:
        values = {"name": animal.name, "weight": animal.weight, "diet": animal.diet}
        # Leave id out so the column default generates it
        if animal.id is not None:
            values["id"] = animal.id
        orm = AnimalORM(**values)
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        return self._to_domain(orm)

    async def get(self, animal_id: UUID) -> Animal | None:
        stmt = select(AnimalORM).where(AnimalORM.id == animal_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Animal]:
        stmt = select(AnimalORM).order_by(AnimalORM.id)
        if offset is not None:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(AnimalORM.id)))
        return result.scalar() or 0

    async def update(self, animal_id: UUID, data: dict) -> Animal | None:
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .values(**data)
            .returning(AnimalORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def delete(self, animal_id: UUID) -> bool:
        stmt = delete(AnimalORM).where(AnimalORM.id == animal_id).returning(AnimalORM.id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

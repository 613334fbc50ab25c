from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.animal import Animal


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, animal_id: UUID) -> Animal | None: ...

    async def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Animal]: ...

    async def count(self) -> int: ...

    async def update(self, animal_id: UUID, data: dict) -> Animal | None: ...

    async def delete(self, animal_id: UUID) -> bool: ...

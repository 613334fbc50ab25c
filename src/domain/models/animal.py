from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

# PostgreSQL "integer" bounds
WEIGHT_MIN = -(2**31)
WEIGHT_MAX = 2**31 - 1


@dataclass(slots=True)
class Animal:
    name: str
    weight: int
    diet: str
    # None until the database assigns one
    id: UUID | None = None

    @classmethod
    def create(
        cls,
        name: str,
        weight: int,
        diet: str,
        id: UUID | None = None,  # noqa: A002
    ) -> Animal:
        return cls(id=id, name=name, weight=weight, diet=diet)

from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal

MAX_LIMIT = 1000


@dataclass(slots=True)
class ListAnimalsResult:
    items: list[Animal]
    total: int


async def execute(
    uow: UnitOfWork,
    *,
    limit: int | None = None,
    offset: int | None = None,
) -> ListAnimalsResult:
    if limit is not None and (limit <= 0 or limit > MAX_LIMIT):
        raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}")
    if offset is not None and offset < 0:
        raise ValidationError("offset must not be negative")

    items = await uow.animals.list(limit=limit, offset=offset)
    # Without paging the page is the whole table
    if limit is None and offset is None:
        total = len(items)
    else:
        total = await uow.animals.count()
    return ListAnimalsResult(items=items, total=total)

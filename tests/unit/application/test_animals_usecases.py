from __future__ import annotations

from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import NotFound, ValidationError
from src.application.use_cases.animals import (
    create_animal,
    delete_animal,
    get_animal,
    list_animals,
    update_animal,
)
from src.domain.models.animal import Animal


class StubRepo:
    def __init__(self) -> None:
        self.add_input = None
        self.update_args = None
        self.count_called = False
        self.items: list[Animal] = []

    async def add(self, animal: Animal) -> Animal:
        self.add_input = animal
        stored = Animal(id=animal.id or uuid4(), name=animal.name, weight=animal.weight, diet=animal.diet)
        self.items.append(stored)
        return stored

    async def get(self, animal_id):
        return next((a for a in self.items if a.id == animal_id), None)

    async def list(self, *, limit=None, offset=None):
        start = offset or 0
        end = None if limit is None else start + limit
        return self.items[start:end]

    async def count(self):
        self.count_called = True
        return len(self.items)

    async def update(self, animal_id, data):
        self.update_args = (animal_id, data)
        return None

    async def delete(self, animal_id):
        return False


def make_uow(repo: StubRepo):
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(animals=repo, commit=commit, rollback=rollback, commits=commits)


@pytest.mark.asyncio
async def test_create_animal_without_id_leaves_generation_to_storage():
    repo = StubRepo()
    uow = make_uow(repo)
    result = await create_animal.execute(
        uow,
        create_animal.CreateAnimalInput(name="Tiger", weight=200, diet="carnivore"),
    )
    assert repo.add_input.id is None
    assert result.id is not None
    assert result.name == "Tiger"
    assert uow.commits == [True]


@pytest.mark.asyncio
async def test_create_animal_keeps_explicit_id():
    repo = StubRepo()
    uow = make_uow(repo)
    animal_id = uuid4()
    result = await create_animal.execute(
        uow,
        create_animal.CreateAnimalInput(id=animal_id, name="Rex", weight=7000, diet="carnivore"),
    )
    assert result.id == animal_id


@pytest.mark.asyncio
async def test_get_animal_missing_raises_not_found():
    uow = make_uow(StubRepo())
    with pytest.raises(NotFound):
        await get_animal.execute(uow, uuid4())


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, list_animals.MAX_LIMIT + 1])
async def test_list_animals_validates_limit(limit):
    uow = make_uow(StubRepo())
    with pytest.raises(ValidationError):
        await list_animals.execute(uow, limit=limit)


@pytest.mark.asyncio
async def test_list_animals_validates_offset():
    uow = make_uow(StubRepo())
    with pytest.raises(ValidationError):
        await list_animals.execute(uow, offset=-1)


@pytest.mark.asyncio
async def test_list_animals_counts_only_when_paging():
    repo = StubRepo()
    for name in ("a", "b", "c"):
        repo.items.append(Animal(id=uuid4(), name=name, weight=1, diet="herbivore"))
    uow = make_uow(repo)

    everything = await list_animals.execute(uow)
    assert everything.total == 3
    assert not repo.count_called

    page = await list_animals.execute(uow, limit=2, offset=2)
    assert [a.name for a in page.items] == ["c"]
    assert page.total == 3
    assert repo.count_called


@pytest.mark.asyncio
async def test_update_missing_raises_not_found_without_commit():
    repo = StubRepo()
    uow = make_uow(repo)
    animal_id = uuid4()
    with pytest.raises(NotFound):
        await update_animal.execute(
            uow,
            animal_id,
            update_animal.UpdateAnimalInput(name="New", weight=1, diet="omnivore"),
        )
    assert repo.update_args == (animal_id, {"name": "New", "weight": 1, "diet": "omnivore"})
    assert uow.commits == []


@pytest.mark.asyncio
async def test_delete_commits_only_when_found():
    repo = StubRepo()
    uow = make_uow(repo)
    with pytest.raises(NotFound):
        await delete_animal.execute(uow, uuid4())
    assert uow.commits == []

    async def delete_stub(animal_id):
        return True

    repo.delete = delete_stub  # type: ignore
    await delete_animal.execute(uow, uuid4())
    assert uow.commits == [True]

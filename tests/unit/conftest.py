from __future__ import annotations

from types import SimpleNamespace

import pytest

from ganado.domain.models.animal import Animal
from ganado.domain.models.reproduction import Reproduction


class InMemoryAnimals:
    def __init__(self) -> None:
        self.items: dict = {}
        self.get_calls = 0
        self.offspring_calls: list = []

    def put(self, *animals: Animal) -> None:
        for animal in animals:
            self.items[animal.id] = animal

    async def add(self, animal: Animal) -> Animal:
        self.items[animal.id] = animal
        return animal

    async def get(self, animal_id):
        self.get_calls += 1
        return self.items.get(animal_id)

    async def list_offspring(self, reproduction_id):
        self.offspring_calls.append(reproduction_id)
        return [a for a in self.items.values() if a.birth_reproduction_id == reproduction_id]

    async def update(self, animal_id, data, expected_version):
        animal = self.items.get(animal_id)
        if animal is None or animal.version != expected_version:
            return None
        for key, value in data.items():
            setattr(animal, key, value)
        animal.bump_version()
        return animal

    async def set_category(self, animal_id, category):
        self.items[animal_id].category = category

    async def deactivate(self, animal_id):
        animal = self.items.get(animal_id)
        if animal is None or not animal.active:
            return False
        animal.active = False
        animal.bump_version()
        return True


class InMemoryReproductions:
    def __init__(self) -> None:
        self.items: dict = {}
        self.dam_calls: list = []

    def put(self, *reproductions: Reproduction) -> None:
        for reproduction in reproductions:
            self.items[reproduction.id] = reproduction

    async def add(self, reproduction: Reproduction) -> Reproduction:
        self.items[reproduction.id] = reproduction
        return reproduction

    async def get(self, reproduction_id):
        return self.items.get(reproduction_id)

    async def list_for_dam(self, dam_id):
        self.dam_calls.append(dam_id)
        return [r for r in self.items.values() if r.dam_id == dam_id]

    async def update(self, reproduction_id, data):
        reproduction = self.items.get(reproduction_id)
        if reproduction is None:
            return None
        for key, value in data.items():
            setattr(reproduction, key, value)
        return reproduction

    async def delete(self, reproduction_id):
        return self.items.pop(reproduction_id, None) is not None


def make_uow(animals: InMemoryAnimals | None = None, reproductions=None):
    commits: list = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(
        animals=animals or InMemoryAnimals(),
        reproductions=reproductions or InMemoryReproductions(),
        commit=commit,
        rollback=rollback,
        commits=commits,
    )


@pytest.fixture()
def uow():
    return make_uow()

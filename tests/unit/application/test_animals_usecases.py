from __future__ import annotations

from datetime import date
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.use_cases.animals import (
    change_animal_state,
    create_animal,
    update_animal,
)
from src.domain.models.animal import Animal, format_unique_id, parse_unique_number
from src.domain.value_objects.animal_status import AnimalStatus, Sex
from src.domain.value_objects.role import Role


class StubAnimals:
    def __init__(self, unique_ids=(), conflicts: int = 0) -> None:
        self.unique_ids = list(unique_ids)
        self.conflicts = conflicts
        self.added: list[Animal] = []
        self.by_unique_id: dict[str, Animal] = {}
        self.updates: list[dict] = []

    async def list_unique_ids(self):
        return list(self.unique_ids)

    async def add(self, animal: Animal) -> Animal:
        if self.conflicts:
            self.conflicts -= 1
            self.unique_ids.append(animal.unique_id)
            raise ConflictError("duplicate unique id")
        self.added.append(animal)
        self.unique_ids.append(animal.unique_id)
        return animal

    async def get_by_unique_id(self, unique_id: str):
        return self.by_unique_id.get(unique_id)

    async def update(self, animal_id, data):
        self.updates.append(data)
        animal = next(a for a in self.by_unique_id.values() if a.id == animal_id)
        for key, value in data.items():
            setattr(animal, key, value)
        return animal


class StubVolunteers:
    def __init__(self, known=()) -> None:
        self.known = set(known)

    async def get(self, volunteer_id):
        return SimpleNamespace(id=volunteer_id) if volunteer_id in self.known else None


class StubAudit:
    def __init__(self) -> None:
        self.entries = []

    async def add(self, entry):
        self.entries.append(entry)
        return entry


def make_uow(animals: StubAnimals, volunteers: StubVolunteers | None = None):
    calls = {"commit": 0, "rollback": 0}

    async def commit():
        calls["commit"] += 1

    async def rollback():
        calls["rollback"] += 1

    return SimpleNamespace(
        animals=animals,
        volunteers=volunteers or StubVolunteers(),
        audit_logs=StubAudit(),
        commit=commit,
        rollback=rollback,
        calls=calls,
    )


def make_input(**overrides) -> create_animal.CreateAnimalInput:
    data = dict(
        name="Biscuit",
        species="Dog",
        breed="Beagle",
        age="2 years",
        sex=Sex.MALE,
        color="Tricolor",
        description="Friendly",
        location="Springfield",
        adoption_fee=150.0,
        intake_date=date(2026, 1, 10),
    )
    data.update(overrides)
    return create_animal.CreateAnimalInput(**data)


def make_animal(owner=None, unique_id="SFP-001", status=AnimalStatus.DRAFT) -> Animal:
    return Animal.create(
        unique_id=unique_id,
        name="Biscuit",
        species="Dog",
        breed="Beagle",
        age="2 years",
        sex=Sex.MALE,
        color="Tricolor",
        description="Friendly",
        location="Springfield",
        adoption_fee=150.0,
        intake_date=date(2026, 1, 10),
        volunteer_id=owner,
        status=status,
    )


def test_unique_id_helpers():
    assert format_unique_id(7) == "SFP-007"
    assert format_unique_id(1234) == "SFP-1234"
    assert parse_unique_number("SFP-042") == 42
    assert parse_unique_number("LEGACY-1") is None


async def test_next_unique_id_skips_foreign_ids():
    uow = make_uow(StubAnimals(["SFP-001", "SFP-010", "OLD-99"]))
    assert await create_animal.next_unique_id(uow) == "SFP-011"


async def test_create_animal_denies_interviewer():
    uow = make_uow(StubAnimals())
    with pytest.raises(PermissionDenied):
        await create_animal.execute(uow, Role.INTERVIEWER, uuid4(), make_input())
    assert uow.animals.added == []


async def test_create_retries_after_unique_id_race():
    animals = StubAnimals(["SFP-001"], conflicts=1)
    uow = make_uow(animals)
    actor = uuid4()
    created = await create_animal.execute(uow, Role.ADMIN, actor, make_input())
    assert created.unique_id == "SFP-003"
    assert uow.calls["rollback"] == 1
    assert uow.calls["commit"] == 1
    assert uow.audit_logs.entries[0].action == "created"


async def test_create_gives_up_after_repeated_conflicts():
    uow = make_uow(StubAnimals(conflicts=create_animal.MAX_ID_ATTEMPTS))
    with pytest.raises(ConflictError):
        await create_animal.execute(uow, Role.ADMIN, uuid4(), make_input())


async def test_foster_is_always_the_owner():
    actor = uuid4()
    uow = make_uow(StubAnimals())
    created = await create_animal.execute(uow, Role.FOSTER, actor, make_input())
    assert created.volunteer_id == actor

    with pytest.raises(PermissionDenied):
        await create_animal.execute(uow, Role.FOSTER, actor, make_input(volunteer_id=uuid4()))


async def test_admin_assigning_unknown_volunteer_is_not_found():
    uow = make_uow(StubAnimals())
    with pytest.raises(NotFound):
        await create_animal.execute(uow, Role.ADMIN, uuid4(), make_input(volunteer_id=uuid4()))


async def test_update_rejects_foster_reassignment():
    owner = uuid4()
    animals = StubAnimals()
    animals.by_unique_id["SFP-001"] = make_animal(owner)
    uow = make_uow(animals, StubVolunteers([owner]))
    with pytest.raises(PermissionDenied):
        await update_animal.execute(
            uow,
            Role.FOSTER,
            owner,
            "SFP-001",
            update_animal.UpdateAnimalInput(volunteer_id=uuid4()),
        )
    assert animals.updates == []


async def test_update_ignores_unset_fields():
    owner = uuid4()
    animals = StubAnimals()
    animals.by_unique_id["SFP-001"] = make_animal(owner)
    uow = make_uow(animals)
    updated = await update_animal.execute(
        uow, Role.FOSTER, owner, "SFP-001", update_animal.UpdateAnimalInput(name="Rex")
    )
    assert updated.name == "Rex"
    assert animals.updates == [{"name": "Rex"}]


async def test_state_change_is_noop_when_unchanged():
    owner = uuid4()
    animals = StubAnimals()
    animals.by_unique_id["SFP-001"] = make_animal(owner, status=AnimalStatus.FOSTERING)
    uow = make_uow(animals)
    result = await change_animal_state.execute(
        uow, Role.FOSTER, owner, "SFP-001", AnimalStatus.FOSTERING
    )
    assert result.status is AnimalStatus.FOSTERING
    assert animals.updates == []
    assert uow.audit_logs.entries == []


async def test_state_change_records_from_and_to():
    animals = StubAnimals()
    animals.by_unique_id["SFP-001"] = make_animal(uuid4())
    uow = make_uow(animals)
    actor = uuid4()
    await change_animal_state.execute(
        uow, Role.INTERVIEWER, actor, "SFP-001", AnimalStatus.INTERVIEWING
    )
    (entry,) = uow.audit_logs.entries
    assert entry.from_value == {"status": "Draft"}
    assert entry.to_value == {"status": "Interviewing"}
    assert entry.actor_user_id == actor


async def test_update_clears_nullable_fields_only():
    owner = uuid4()
    animals = StubAnimals()
    animal = make_animal(owner)
    animal.internal_notes = "bites strangers"
    animals.by_unique_id["SFP-001"] = animal
    uow = make_uow(animals)

    with pytest.raises(ValidationError):
        await update_animal.execute(
            uow, Role.ADMIN, uuid4(), "SFP-001", update_animal.UpdateAnimalInput(breed=None)
        )
    assert animals.updates == []

    updated = await update_animal.execute(
        uow, Role.ADMIN, uuid4(), "SFP-001", update_animal.UpdateAnimalInput(internal_notes=None)
    )
    assert updated.internal_notes is None
    assert animals.updates == [{"internal_notes": None}]

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_status import AnimalStatus


@dataclass(slots=True)
class ListAnimalsResult:
    items: list[Animal]
    total: int


async def execute(
    uow: UnitOfWork,
    *,
    statuses: list[AnimalStatus] | None = None,
    volunteer_id: UUID | None = None,
    search: str | None = None,
    limit: int = 50,
    offset: int = 0,
) -> ListAnimalsResult:
    if limit <= 0 or limit > 200:
        raise ValidationError("limit must be between 1 and 200")
    if offset < 0:
        raise ValidationError("offset must be zero or positive")
    items = await uow.animals.list(
        statuses=statuses,
        volunteer_id=volunteer_id,
        search=search,
        limit=limit,
        offset=offset,
    )
    total = await uow.animals.count(statuses=statuses, volunteer_id=volunteer_id, search=search)
    return ListAnimalsResult(items=items, total=total)


async def list_available(uow: UnitOfWork) -> list[Animal]:
    return await uow.animals.list(statuses=[AnimalStatus.PUBLISHED])


async def list_adopted(uow: UnitOfWork) -> list[Animal]:
    return await uow.animals.list(statuses=[AnimalStatus.ADOPTED])

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.animal_status import AnimalStatus
from src.domain.value_objects.application_status import ApplicationStatus, FinalDecision
from src.domain.value_objects.role import Role

RECENT_ADOPTION_DAYS = 30


@dataclass(slots=True)
class AdminSection:
    volunteers: int
    contracts_awaiting_signature: int


@dataclass(slots=True)
class FosterSection:
    my_animals: int
    my_animals_by_status: dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class InterviewerSection:
    my_pending_interviews: int
    my_interviews: int


@dataclass(slots=True)
class DashboardSummary:
    role: Role
    total_animals: int
    available_animals: int
    in_foster_care: int
    pending_applications: int
    interviews_scheduled: int
    recently_adopted: int
    admin: AdminSection | None = None
    foster: FosterSection | None = None
    interviewer: InterviewerSection | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_id: UUID,
    *,
    now: datetime | None = None,
) -> DashboardSummary:
    now = now or datetime.now(timezone.utc)
    summary = DashboardSummary(
        role=role,
        total_animals=await uow.animals.count(),
        available_animals=await uow.animals.count(statuses=[AnimalStatus.PUBLISHED]),
        in_foster_care=await uow.animals.count(statuses=[AnimalStatus.FOSTERING]),
        pending_applications=await uow.applications.count(
            statuses=list(ApplicationStatus.pending())
        ),
        interviews_scheduled=await uow.interviews.count(
            final_decision=FinalDecision.PENDING, scheduled_only=True
        ),
        recently_adopted=await uow.animals.count(
            statuses=[AnimalStatus.ADOPTED],
            updated_since=now - timedelta(days=RECENT_ADOPTION_DAYS),
        ),
    )
    if role is Role.ADMIN:
        summary.admin = AdminSection(
            volunteers=await uow.volunteers.count(),
            contracts_awaiting_signature=await uow.contracts.count_unsigned(),
        )
    elif role is Role.FOSTER:
        by_status = await uow.animals.count_by_status(volunteer_id=actor_id)
        summary.foster = FosterSection(
            my_animals=sum(by_status.values()), my_animals_by_status=by_status
        )
    elif role is Role.INTERVIEWER:
        summary.interviewer = InterviewerSection(
            my_pending_interviews=await uow.interviews.count(
                volunteer_id=actor_id, final_decision=FinalDecision.PENDING
            ),
            my_interviews=await uow.interviews.count(volunteer_id=actor_id),
        )
    return summary

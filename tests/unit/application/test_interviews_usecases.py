from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import AppError, PermissionDenied
from src.application.use_cases.interviews import update_interview
from src.domain.models.interview import Interview
from src.domain.value_objects.application_status import FinalDecision
from src.domain.value_objects.role import Role


class StubInterviews:
    def __init__(self, interview: Interview) -> None:
        self.interview = interview
        self.updates: list[dict] = []

    async def get(self, interview_id):
        return self.interview if interview_id == self.interview.id else None

    async def update(self, interview_id, data):
        self.updates.append(data)
        for key, value in data.items():
            setattr(self.interview, key, value)
        return self.interview


def make_uow(interviews: StubInterviews):
    entries = []

    async def add(entry):
        entries.append(entry)

    async def commit():
        return None

    return SimpleNamespace(
        interviews=interviews,
        audit_logs=SimpleNamespace(add=add, entries=entries),
        commit=commit,
    )


def make_interview(volunteer_id, interview_time=None) -> Interview:
    return Interview.schedule(
        application_id=uuid4(),
        volunteer_id=volunteer_id,
        volunteer_name="Ivy Interviewer",
        interview_time=interview_time,
    )


async def test_unassigned_interviewer_is_denied():
    interview = make_interview(uuid4())
    uow = make_uow(StubInterviews(interview))
    with pytest.raises(PermissionDenied):
        await update_interview.execute(
            uow,
            Role.INTERVIEWER,
            uuid4(),
            interview.id,
            update_interview.UpdateInterviewInput(interview_result="notes"),
        )


async def test_time_can_only_be_set_once():
    me = uuid4()
    interview = make_interview(me, interview_time=datetime(2026, 5, 1, tzinfo=timezone.utc))
    uow = make_uow(StubInterviews(interview))
    with pytest.raises(AppError):
        await update_interview.execute(
            uow,
            Role.INTERVIEWER,
            me,
            interview.id,
            update_interview.UpdateInterviewInput(
                interview_time=datetime(2026, 5, 2, tzinfo=timezone.utc)
            ),
        )


async def test_final_decision_is_admin_only_and_audited():
    me = uuid4()
    interview = make_interview(me)
    interviews = StubInterviews(interview)
    uow = make_uow(interviews)
    payload = update_interview.UpdateInterviewInput(final_decision=FinalDecision.REJECTED)

    with pytest.raises(PermissionDenied):
        await update_interview.execute(uow, Role.INTERVIEWER, me, interview.id, payload)

    admin = uuid4()
    updated = await update_interview.execute(uow, Role.ADMIN, admin, interview.id, payload)
    assert updated.final_decision is FinalDecision.REJECTED
    (entry,) = uow.audit_logs.entries
    assert entry.from_value == {"final_decision": "pending"}
    assert entry.to_value == {"final_decision": "rejected"}
    assert entry.actor_user_id == admin

from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.animal_photos import AnimalPhotoRepository
from src.application.interfaces.repositories.animals import AnimalRepository
from src.application.interfaces.repositories.applications import ApplicationRepository
from src.application.interfaces.repositories.audit_logs import AuditLogRepository
from src.application.interfaces.repositories.contracts import ContractRepository
from src.application.interfaces.repositories.email_logs import EmailLogRepository
from src.application.interfaces.repositories.interviews import InterviewRepository
from src.application.interfaces.repositories.volunteers import VolunteerRepository


class UnitOfWork(Protocol):
    volunteers: VolunteerRepository
    animals: AnimalRepository
    animal_photos: AnimalPhotoRepository
    applications: ApplicationRepository
    interviews: InterviewRepository
    contracts: ContractRepository
    audit_logs: AuditLogRepository
    email_logs: EmailLogRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

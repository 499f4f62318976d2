from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._clear_repositories()

    def _clear_repositories(self) -> None:
        self.volunteers = None
        self.animals = None
        self.animal_photos = None
        self.applications = None
        self.interviews = None
        self.contracts = None
        self.audit_logs = None
        self.email_logs = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.animal_photos_sqlalchemy import (
            AnimalPhotosSQLAlchemyRepository,
        )
        from src.infrastructure.repos.animals_sqlalchemy import AnimalsSQLAlchemyRepository
        from src.infrastructure.repos.applications_sqlalchemy import (
            ApplicationsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.audit_logs_sqlalchemy import AuditLogsSQLAlchemyRepository
        from src.infrastructure.repos.contracts_sqlalchemy import ContractsSQLAlchemyRepository
        from src.infrastructure.repos.email_logs_sqlalchemy import EmailLogsSQLAlchemyRepository
        from src.infrastructure.repos.interviews_sqlalchemy import InterviewsSQLAlchemyRepository
        from src.infrastructure.repos.volunteers_sqlalchemy import VolunteersSQLAlchemyRepository

        self.volunteers = VolunteersSQLAlchemyRepository(self.session)
        self.animals = AnimalsSQLAlchemyRepository(self.session)
        self.animal_photos = AnimalPhotosSQLAlchemyRepository(self.session)
        self.applications = ApplicationsSQLAlchemyRepository(self.session)
        self.interviews = InterviewsSQLAlchemyRepository(self.session)
        self.contracts = ContractsSQLAlchemyRepository(self.session)
        self.audit_logs = AuditLogsSQLAlchemyRepository(self.session)
        self.email_logs = EmailLogsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._clear_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.repositories.contracts import ContractRepository
from src.domain.models.contract import Contract
from src.infrastructure.db.orm.contract import ContractORM
from src.utils.datetime_tz import ensure_utc


class ContractsSQLAlchemyRepository(ContractRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ContractORM) -> Contract:
        return Contract(
            id=orm.id,
            application_id=orm.application_id,
            animal_id=orm.animal_id,
            adoption_fee=Decimal(orm.adoption_fee) if orm.adoption_fee is not None else None,
            payment_proof=orm.payment_proof,
            signature=orm.signature,
            contract_token=orm.contract_token,
            token_expires_at=ensure_utc(orm.token_expires_at),
            token_used=orm.token_used,
            signed_at=ensure_utc(orm.signed_at),
            created_at=ensure_utc(orm.created_at),
        )

    async def add(self, contract: Contract) -> Contract:
        orm = ContractORM(
            id=contract.id,
            application_id=contract.application_id,
            animal_id=contract.animal_id,
            adoption_fee=contract.adoption_fee,
            payment_proof=contract.payment_proof,
            signature=contract.signature,
            contract_token=contract.contract_token,
            token_expires_at=contract.token_expires_at,
            token_used=contract.token_used,
            signed_at=contract.signed_at,
            created_at=contract.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create contract due to constraint violation") from exc
        return self._to_domain(orm)

    async def get(self, contract_id: UUID) -> Contract | None:
        stmt = select(ContractORM).where(ContractORM.id == contract_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_token(self, token: str) -> Contract | None:
        stmt = select(ContractORM).where(ContractORM.contract_token == token)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, *, animal_id: UUID | None = None) -> list[Contract]:
        stmt = select(ContractORM)
        if animal_id is not None:
            stmt = stmt.where(ContractORM.animal_id == animal_id)
        stmt = stmt.order_by(ContractORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def count_unsigned(self) -> int:
        stmt = select(func.count(ContractORM.id)).where(ContractORM.signed_at.is_(None))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_for_application(self, application_id: UUID) -> int:
        stmt = select(func.count(ContractORM.id)).where(
            ContractORM.application_id == application_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, contract: Contract) -> Contract:
        stmt = (
            update(ContractORM)
            .where(ContractORM.id == contract.id)
            .values(
                adoption_fee=contract.adoption_fee,
                payment_proof=contract.payment_proof,
                signature=contract.signature,
                contract_token=contract.contract_token,
                token_expires_at=contract.token_expires_at,
                token_used=contract.token_used,
                signed_at=contract.signed_at,
            )
            .returning(ContractORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Contract token collision") from exc
        orm = result.scalar_one_or_none()
        if orm is None:
            raise NotFound("Contract not found")
        return self._to_domain(orm)

    async def claim_token(
        self, token: str, *, payment_proof: str, signature: str, now: datetime
    ) -> Contract | None:
        stmt = (
            update(ContractORM)
            .where(
                ContractORM.contract_token == token,
                ContractORM.token_used.is_(False),
                or_(ContractORM.token_expires_at.is_(None), ContractORM.token_expires_at > now),
            )
            .values(
                payment_proof=payment_proof,
                signature=signature,
                token_used=True,
                signed_at=now,
            )
            .returning(ContractORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, contract_id: UUID) -> bool:
        result = await self.session.execute(
            delete(ContractORM).where(ContractORM.id == contract_id)
        )
        return result.rowcount > 0

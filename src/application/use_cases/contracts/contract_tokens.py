from __future__ import annotations

import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from src.application.errors import ConflictError, GoneError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.contracts.manage_contracts import ensure_admin
from src.domain.models.animal import Animal
from src.domain.models.application import Application
from src.domain.models.audit_log import AuditLog
from src.domain.models.contract import Contract
from src.domain.value_objects.audit import AuditEntityType
from src.domain.value_objects.role import Role

TOKEN_BYTES = 32


def generate_token() -> str:
    # 64 hex characters
    return secrets.token_hex(TOKEN_BYTES)


@dataclass(slots=True)
class ContractView:
    contract: Contract
    application: Application | None
    animal: Animal | None


@dataclass(slots=True)
class IssuedToken:
    view: ContractView
    token: str
    expires_at: datetime


async def _view(uow: UnitOfWork, contract: Contract) -> ContractView:
    return ContractView(
        contract=contract,
        application=await uow.applications.get(contract.application_id),
        animal=await uow.animals.get(contract.animal_id),
    )


async def issue_token(
    uow: UnitOfWork,
    role: Role,
    actor_id: UUID,
    contract_id: UUID,
    *,
    expires_in_hours: int,
    token_factory: Callable[[], str] = generate_token,
) -> IssuedToken:
    ensure_admin(role)
    contract = await uow.contracts.get(contract_id)
    if not contract:
        raise NotFound("Contract not found")
    if contract.token_used:
        raise ConflictError("Contract has already been signed through its link")
    contract.issue_token(token_factory(), expires_in_hours=expires_in_hours)
    saved = await uow.contracts.save(contract)
    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.CONTRACT,
            entity_id=contract_id,
            action="token_issued",
            actor_user_id=actor_id,
            to_value={"expires_at": saved.token_expires_at.isoformat()},
        )
    )
    await uow.commit()
    return IssuedToken(
        view=await _view(uow, saved),
        token=saved.contract_token,
        expires_at=saved.token_expires_at,
    )


async def _get_valid(uow: UnitOfWork, token: str) -> Contract:
    contract = await uow.contracts.get_by_token(token)
    if not contract:
        raise NotFound("Contract link is invalid")
    if contract.token_used:
        raise ConflictError("Contract link has already been used")
    if contract.is_token_expired():
        raise GoneError("Contract link has expired")
    return contract


async def get_by_token(uow: UnitOfWork, token: str) -> ContractView:
    return await _view(uow, await _get_valid(uow, token))


async def submit_by_token(
    uow: UnitOfWork, token: str, *, payment_proof: str, signature: str
) -> ContractView:
    if not payment_proof or not payment_proof.strip():
        raise ValidationError("Payment proof is required")
    if not signature or not signature.strip():
        raise ValidationError("Signature is required")
    contract = await _get_valid(uow, token)
    # Matches only an unused, unexpired token
    saved = await uow.contracts.claim_token(
        token,
        payment_proof=payment_proof,
        signature=signature,
        now=datetime.now(timezone.utc),
    )
    if saved is None:
        await uow.rollback()
        raise ConflictError("Contract link has already been used")
    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.CONTRACT,
            entity_id=contract.id,
            action="signed",
            to_value={"signed_at": saved.signed_at.isoformat()},
        )
    )
    await uow.commit()
    return await _view(uow, saved)

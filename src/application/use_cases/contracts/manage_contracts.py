from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.unset import UNSET
from src.domain.models.contract import Contract
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class UpdateContractInput:
    adoption_fee: Decimal | None = UNSET
    payment_proof: str | None = UNSET
    signature: str | None = UNSET


def ensure_admin(role: Role) -> None:
    if not role.is_admin():
        raise PermissionDenied("Only admins can manage contracts")


async def list_contracts(uow: UnitOfWork, role: Role) -> list[Contract]:
    ensure_admin(role)
    return await uow.contracts.list()


async def get_contract(uow: UnitOfWork, role: Role, contract_id: UUID) -> Contract:
    ensure_admin(role)
    contract = await uow.contracts.get(contract_id)
    if not contract:
        raise NotFound("Contract not found")
    return contract


async def list_for_animal(uow: UnitOfWork, role: Role, unique_id: str) -> list[Contract]:
    ensure_admin(role)
    animal = await uow.animals.get_by_unique_id(unique_id)
    if not animal:
        raise NotFound("Animal not found")
    return await uow.contracts.list(animal_id=animal.id)


async def update_contract(
    uow: UnitOfWork, role: Role, contract_id: UUID, payload: UpdateContractInput
) -> Contract:
    contract = await get_contract(uow, role, contract_id)
    if payload.adoption_fee is not UNSET:
        contract.adoption_fee = payload.adoption_fee
    if payload.payment_proof is not UNSET:
        contract.payment_proof = payload.payment_proof
    if payload.signature is not UNSET:
        contract.signature = payload.signature
        if payload.signature is None:
            contract.signed_at = None
        elif contract.signed_at is None:
            contract.signed_at = datetime.now(timezone.utc)
    saved = await uow.contracts.save(contract)
    await uow.commit()
    return saved


async def delete_contract(uow: UnitOfWork, role: Role, contract_id: UUID) -> None:
    ensure_admin(role)
    if not await uow.contracts.delete(contract_id):
        raise NotFound("Contract not found")
    await uow.commit()

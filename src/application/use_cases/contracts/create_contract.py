from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.application.errors import ConflictError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.audit_log import AuditLog
from src.domain.models.contract import Contract
from src.domain.value_objects.application_status import ApplicationStatus
from src.domain.value_objects.audit import AuditEntityType


@dataclass(slots=True)
class CreateContractInput:
    application_id: UUID
    payment_proof: str
    signature: str | None = None
    adoption_fee: Decimal | None = None


async def execute(uow: UnitOfWork, payload: CreateContractInput) -> Contract:
    if not payload.payment_proof or not payload.payment_proof.strip():
        raise ValidationError("Payment proof is required")
    application = await uow.applications.get(payload.application_id)
    if not application:
        raise NotFound("Application not found")
    if application.status is not ApplicationStatus.APPROVED:
        raise ConflictError(
            "Contracts can only be created for approved applications",
            details={"status": application.status.value},
        )
    adoption_fee = payload.adoption_fee
    if adoption_fee is None:
        animal = await uow.animals.get(application.animal_id)
        adoption_fee = Decimal(str(animal.adoption_fee)) if animal else None

    contract = await uow.contracts.add(
        Contract.create(
            application_id=application.id,
            animal_id=application.animal_id,
            adoption_fee=adoption_fee,
            payment_proof=payload.payment_proof,
            signature=payload.signature,
        )
    )
    await uow.audit_logs.add(
        AuditLog.record(
            entity_type=AuditEntityType.CONTRACT,
            entity_id=contract.id,
            action="created",
            to_value={"application_id": str(application.id), "signed": bool(contract.signature)},
        )
    )
    await uow.commit()
    return contract

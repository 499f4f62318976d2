from __future__ import annotations

from typing import Protocol
from datetime import datetime
from uuid import UUID

from src.domain.models.contract import Contract


class ContractRepository(Protocol):
    async def add(self, contract: Contract) -> Contract: ...

    async def get(self, contract_id: UUID) -> Contract | None: ...

    async def get_by_token(self, token: str) -> Contract | None: ...

    async def list(self, *, animal_id: UUID | None = None) -> list[Contract]: ...

    async def count_unsigned(self) -> int: ...

    async def count_for_application(self, application_id: UUID) -> int: ...

    async def save(self, contract: Contract) -> Contract: ...

    async def claim_token(
        self, token: str, *, payment_proof: str, signature: str, now: datetime
    ) -> Contract | None: ...

    async def delete(self, contract_id: UUID) -> bool: ...

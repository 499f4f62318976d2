from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Sequence
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Response, status

from src.application.use_cases.contracts import (
    contract_tokens,
    create_contract,
    manage_contracts,
)
from src.config.settings import Settings
from src.domain.models.contract import Contract
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.services.adoption_mailer import AdoptionMailer
from src.interfaces.http.deps import get_app_settings, get_auth_context, get_mailer, get_uow
from src.interfaces.http.routers.animals import build_summary, load_image_urls
from src.interfaces.http.routers.applications import present_applications, summarize
from src.interfaces.http.schemas.contracts import (
    ContractCreate,
    ContractResponse,
    ContractSubmit,
    ContractTokenResponse,
    ContractUpdate,
)

router = APIRouter(prefix="/contracts", tags=["contracts"])
logger = logging.getLogger(__name__)


async def _present(uow, contracts: Sequence[Contract]) -> list[ContractResponse]:
    animals = await uow.animals.get_many(list({c.animal_id for c in contracts}))
    urls = await load_image_urls(uow, list(animals.values()))
    applications = []
    for application_id in {c.application_id for c in contracts}:
        application = await uow.applications.get(application_id)
        if application:
            applications.append(application)
    summaries = {a.id: summarize(a) for a in await present_applications(uow, applications)}

    results = []
    for contract in contracts:
        data = asdict(contract)
        # The signing token is only ever handed out by the issue endpoint
        data.pop("contract_token", None)
        animal = animals.get(contract.animal_id)
        data["animal_id"] = animal.unique_id if animal else str(contract.animal_id)
        data["animal"] = build_summary(animal, urls.get(animal.id)) if animal else None
        data["application"] = summaries.get(contract.application_id)
        results.append(ContractResponse.model_validate(data))
    return results


@router.post("/", response_model=ContractResponse, status_code=status.HTTP_201_CREATED)
async def create(payload: ContractCreate, uow=Depends(get_uow)) -> ContractResponse:
    contract = await create_contract.execute(
        uow, create_contract.CreateContractInput(**payload.model_dump())
    )
    logger.info("Contract %s created for application %s", contract.id, contract.application_id)
    (response,) = await _present(uow, [contract])
    return response


@router.get("/", response_model=list[ContractResponse])
async def list_all(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> list[ContractResponse]:
    contracts = await manage_contracts.list_contracts(uow, context.role)
    return await _present(uow, contracts)


@router.get("/token/{token}", response_model=ContractResponse)
async def get_by_token(token: str, uow=Depends(get_uow)) -> ContractResponse:
    view = await contract_tokens.get_by_token(uow, token)
    (response,) = await _present(uow, [view.contract])
    return response


@router.post("/token/{token}/submit", response_model=ContractResponse)
async def submit_by_token(
    token: str, payload: ContractSubmit, uow=Depends(get_uow)
) -> ContractResponse:
    view = await contract_tokens.submit_by_token(
        uow, token, payment_proof=payload.payment_proof, signature=payload.signature
    )
    logger.info("Contract %s signed through its link", view.contract.id)
    (response,) = await _present(uow, [view.contract])
    return response


@router.get("/animal/{unique_id}", response_model=list[ContractResponse])
async def list_for_animal(
    unique_id: str,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[ContractResponse]:
    contracts = await manage_contracts.list_for_animal(uow, context.role, unique_id)
    return await _present(uow, contracts)


@router.get("/{contract_id}", response_model=ContractResponse)
async def get_one(
    contract_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ContractResponse:
    contract = await manage_contracts.get_contract(uow, context.role, contract_id)
    (response,) = await _present(uow, [contract])
    return response


@router.patch("/{contract_id}", response_model=ContractResponse)
async def update(
    contract_id: UUID,
    payload: ContractUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ContractResponse:
    contract = await manage_contracts.update_contract(
        uow,
        context.role,
        contract_id,
        manage_contracts.UpdateContractInput(**payload.model_dump(exclude_unset=True)),
    )
    (response,) = await _present(uow, [contract])
    return response


@router.post("/{contract_id}/token", response_model=ContractTokenResponse)
async def issue_token(
    contract_id: UUID,
    background_tasks: BackgroundTasks,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    mailer: AdoptionMailer = Depends(get_mailer),
) -> ContractTokenResponse:
    issued = await contract_tokens.issue_token(
        uow,
        context.role,
        context.volunteer_id,
        contract_id,
        expires_in_hours=settings.contract_token_expires_hours,
    )
    url = settings.contract_link(issued.token)
    if issued.view.application is not None and issued.view.animal is not None:
        background_tasks.add_task(
            mailer.contract_link,
            issued.view.application,
            issued.view.animal,
            contract_url=url,
            expires_at=issued.expires_at,
        )
    return ContractTokenResponse(token=issued.token, expires_at=issued.expires_at, url=url)


@router.delete("/{contract_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(
    contract_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await manage_contracts.delete_contract(uow, context.role, contract_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

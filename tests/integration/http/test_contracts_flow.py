from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def _approved_application(client, create_animal, submit_application, auth_headers) -> dict:
    animal = await create_animal(status="Published", adoption_fee=175.0)
    application = await submit_application(animal["unique_id"])
    resp = await client.patch(
        f"/api/applications/{application['id']}/status",
        json={"status": "approved"},
        headers=auth_headers("admin"),
    )
    assert resp.status_code == 200
    return application


async def test_contract_requires_approved_application(
    client, create_animal, submit_application
):
    animal = await create_animal(status="Published")
    application = await submit_application(animal["unique_id"])
    resp = await client.post(
        "/api/contracts/",
        json={"application_id": application["id"], "payment_proof": "receipt-1"},
    )
    assert resp.status_code == 409

    missing = await client.post(
        "/api/contracts/",
        json={"application_id": "00000000-0000-0000-0000-000000000004", "payment_proof": "x"},
    )
    assert missing.status_code == 404


async def test_public_create_defaults_fee_from_animal(
    client, create_animal, submit_application, auth_headers
):
    application = await _approved_application(client, create_animal, submit_application, auth_headers)
    resp = await client.post(
        "/api/contracts/",
        json={"application_id": application["id"], "payment_proof": "receipt-1"},
    )
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert Decimal(body["adoption_fee"]) == Decimal("175")
    assert body["animal_id"] == application["animal_id"]
    assert body["token_used"] is False
    assert body["signed_at"] is None
    assert "contract_token" not in body

    assert (await client.get("/api/contracts/", headers=auth_headers("foster"))).status_code == 403
    listing = await client.get("/api/contracts/", headers=auth_headers("admin"))
    assert [c["id"] for c in listing.json()] == [body["id"]]
    by_animal = await client.get(
        f"/api/contracts/animal/{application['animal_id']}", headers=auth_headers("admin")
    )
    assert len(by_animal.json()) == 1


async def test_token_link_signing_flow(
    app, client, create_animal, submit_application, auth_headers, email_service
):
    application = await _approved_application(client, create_animal, submit_application, auth_headers)
    contract = (
        await client.post(
            "/api/contracts/",
            json={"application_id": application["id"], "payment_proof": "pending"},
        )
    ).json()
    email_service.sent.clear()

    issued = await client.post(
        f"/api/contracts/{contract['id']}/token", headers=auth_headers("admin")
    )
    assert issued.status_code == 200, issued.text
    token_body = issued.json()
    token = token_body["token"]
    assert len(token) == 64
    assert token_body["url"] == f"http://frontend.test/contract/sign?token={token}"
    assert email_service.recipients() == ["jamie@example.com"]
    assert token_body["url"] in email_service.sent[0].text

    view = await client.get(f"/api/contracts/token/{token}")
    assert view.status_code == 200
    assert view.json()["application"]["full_name"] == "Jamie Adopter"
    assert view.json()["animal"]["unique_id"] == application["animal_id"]

    signed = await client.post(
        f"/api/contracts/token/{token}/submit",
        json={"payment_proof": "receipt-42", "signature": "Jamie Adopter"},
    )
    assert signed.status_code == 200, signed.text
    assert signed.json()["token_used"] is True
    assert signed.json()["signed_at"] is not None
    assert signed.json()["signature"] == "Jamie Adopter"

    reused = await client.post(
        f"/api/contracts/token/{token}/submit",
        json={"payment_proof": "again", "signature": "again"},
    )
    assert reused.status_code == 409
    assert (await client.get(f"/api/contracts/token/{token}")).status_code == 409

    reissue = await client.post(
        f"/api/contracts/{contract['id']}/token", headers=auth_headers("admin")
    )
    assert reissue.status_code == 409


async def test_unknown_and_expired_tokens(
    app, client, create_animal, submit_application, auth_headers
):
    assert (await client.get("/api/contracts/token/" + "0" * 64)).status_code == 404

    application = await _approved_application(client, create_animal, submit_application, auth_headers)
    contract = (
        await client.post(
            "/api/contracts/",
            json={"application_id": application["id"], "payment_proof": "pending"},
        )
    ).json()
    issued = await client.post(
        f"/api/contracts/{contract['id']}/token", headers=auth_headers("admin")
    )
    token = issued.json()["token"]

    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        stored = await uow.contracts.get_by_token(token)
        stored.token_expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)
        await uow.contracts.save(stored)
        await uow.commit()

    expired = await client.get(f"/api/contracts/token/{token}")
    assert expired.status_code == 410
    submit = await client.post(
        f"/api/contracts/token/{token}/submit",
        json={"payment_proof": "late", "signature": "late"},
    )
    assert submit.status_code == 410


async def test_admin_updates_and_deletes(
    client, create_animal, submit_application, auth_headers
):
    application = await _approved_application(client, create_animal, submit_application, auth_headers)
    contract = (
        await client.post(
            "/api/contracts/",
            json={"application_id": application["id"], "payment_proof": "pending"},
        )
    ).json()
    headers = auth_headers("admin")

    updated = await client.patch(
        f"/api/contracts/{contract['id']}",
        json={"adoption_fee": "120.50", "signature": "J. Adopter"},
        headers=headers,
    )
    assert updated.status_code == 200, updated.text
    assert Decimal(updated.json()["adoption_fee"]) == Decimal("120.50")
    assert updated.json()["signed_at"] is not None

    cleared = await client.patch(
        f"/api/contracts/{contract['id']}",
        json={"signature": None, "payment_proof": None},
        headers=headers,
    )
    assert cleared.status_code == 200, cleared.text
    assert cleared.json()["signature"] is None
    assert cleared.json()["payment_proof"] is None
    assert cleared.json()["signed_at"] is None
    assert Decimal(cleared.json()["adoption_fee"]) == Decimal("120.50")

    # Applications with a contract cannot be deleted
    blocked = await client.delete(f"/api/applications/{application['id']}", headers=headers)
    assert blocked.status_code == 409

    deleted = await client.delete(f"/api/contracts/{contract['id']}", headers=headers)
    assert deleted.status_code == 204
    assert (await client.get(f"/api/contracts/{contract['id']}", headers=headers)).status_code == 404


async def test_concurrent_submits_sign_only_once(
    app, client, create_animal, submit_application, auth_headers
):
    application = await _approved_application(client, create_animal, submit_application, auth_headers)
    contract = (
        await client.post(
            "/api/contracts/",
            json={"application_id": application["id"], "payment_proof": "pending"},
        )
    ).json()
    issued = await client.post(
        f"/api/contracts/{contract['id']}/token", headers=auth_headers("admin")
    )
    token = issued.json()["token"]

    first, second = await asyncio.gather(
        client.post(
            f"/api/contracts/token/{token}/submit",
            json={"payment_proof": "proof-a", "signature": "Signer A"},
        ),
        client.post(
            f"/api/contracts/token/{token}/submit",
            json={"payment_proof": "proof-b", "signature": "Signer B"},
        ),
    )
    assert sorted([first.status_code, second.status_code]) == [200, 409]
    winner = first if first.status_code == 200 else second

    stored = await client.get(f"/api/contracts/{contract['id']}", headers=auth_headers("admin"))
    assert stored.json()["signature"] == winner.json()["signature"]
    assert stored.json()["payment_proof"] == winner.json()["payment_proof"]

    audit = await client.get(
        "/api/audit-logs/",
        params={"entity_type": "CONTRACT", "entity_id": contract["id"]},
        headers=auth_headers("admin"),
    )
    assert [entry["action"] for entry in audit.json()].count("signed") == 1

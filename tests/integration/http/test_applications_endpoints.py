from __future__ import annotations

from src.domain.value_objects.audit import EmailStatus
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def test_submit_is_public_and_notifies(
    app, client, create_animal, submit_application, email_service
):
    animal = await create_animal(status="Published", name="Clover")
    body = await submit_application(animal["unique_id"])

    assert body["status"] == "submitted"
    assert body["email"] == "jamie@example.com"
    assert body["animal_id"] == animal["unique_id"]
    assert body["animal"]["name"] == "Clover"
    assert body["animal"]["status"] == "Published"

    # Applicant confirmation plus one notice per active admin and interviewer
    assert sorted(email_service.recipients()) == [
        "admin@example.com",
        "interviewer@example.com",
        "jamie@example.com",
    ]
    subjects = {m.subject for m in email_service.sent}
    assert f"Application Received - Clover ({animal['unique_id']})" in subjects

    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        logs = await uow.email_logs.list()
    assert len(logs) == 3
    assert {log.status for log in logs} == {EmailStatus.SENT}


async def test_failed_email_does_not_fail_request(
    app, client, create_animal, application_payload, email_service
):
    async def broken_send(message):
        raise RuntimeError("smtp down")

    email_service.send = broken_send
    animal = await create_animal(status="Published")
    resp = await client.post("/api/applications/", json=application_payload(animal["unique_id"]))
    assert resp.status_code == 201

    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        logs = await uow.email_logs.list()
    assert logs
    assert all(log.status is EmailStatus.FAILED for log in logs)
    assert all(log.error_message == "smtp down" for log in logs)


async def test_submit_validation(client, create_animal, application_payload):
    animal = await create_animal(status="Published")
    no_terms = await client.post(
        "/api/applications/",
        json=application_payload(animal["unique_id"], agreed_to_terms=False),
    )
    assert no_terms.status_code == 422

    unknown = await client.post("/api/applications/", json=application_payload("SFP-404"))
    assert unknown.status_code == 404


async def test_listing_permissions(client, create_animal, submit_application, auth_headers):
    animal = await create_animal(status="Published")
    created = await submit_application(animal["unique_id"])

    assert (await client.get("/api/applications/")).status_code == 401
    denied = await client.get("/api/applications/", headers=auth_headers("foster"))
    assert denied.status_code == 403

    listing = await client.get("/api/applications/", headers=auth_headers("interviewer"))
    assert listing.status_code == 200
    assert [a["id"] for a in listing.json()] == [created["id"]]

    by_animal = await client.get(
        f"/api/applications/animal/{animal['unique_id']}", headers=auth_headers("foster")
    )
    assert by_animal.status_code == 200
    assert len(by_animal.json()) == 1

    single = await client.get(
        f"/api/applications/{created['id']}", headers=auth_headers("admin")
    )
    assert single.status_code == 200
    assert single.json()["full_name"] == "Jamie Adopter"


async def test_status_updates(
    client, create_animal, submit_application, auth_headers, email_service
):
    animal = await create_animal(status="Published")
    created = await submit_application(animal["unique_id"])
    url = f"/api/applications/{created['id']}/status"
    email_service.sent.clear()

    approve_as_interviewer = await client.patch(
        url, json={"status": "approved"}, headers=auth_headers("interviewer")
    )
    assert approve_as_interviewer.status_code == 403

    review = await client.patch(url, json={"status": "review"}, headers=auth_headers("interviewer"))
    assert review.status_code == 200
    assert review.json()["status"] == "review"
    assert email_service.recipients() == ["jamie@example.com"]

    approved = await client.patch(url, json={"status": "approved"}, headers=auth_headers("admin"))
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"

    filtered = await client.get(
        "/api/applications/", params={"status": "approved"}, headers=auth_headers("admin")
    )
    assert [a["id"] for a in filtered.json()] == [created["id"]]

    audit = await client.get(
        "/api/audit-logs/",
        params={"entity_type": "APPLICATION", "entity_id": created["id"]},
        headers=auth_headers("admin"),
    )
    actions = [e["action"] for e in audit.json()]
    assert actions.count("status_changed") == 2
    assert "submitted" in actions


async def test_delete_application(client, create_animal, submit_application, auth_headers):
    animal = await create_animal(status="Published")
    created = await submit_application(animal["unique_id"])

    denied = await client.delete(
        f"/api/applications/{created['id']}", headers=auth_headers("interviewer")
    )
    assert denied.status_code == 403
    resp = await client.delete(f"/api/applications/{created['id']}", headers=auth_headers("admin"))
    assert resp.status_code == 204
    missing = await client.get(f"/api/applications/{created['id']}", headers=auth_headers("admin"))
    assert missing.status_code == 404

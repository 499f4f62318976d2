from __future__ import annotations


async def _application(create_animal, submit_application) -> dict:
    animal = await create_animal(status="Published")
    return await submit_application(animal["unique_id"])


async def test_interviewer_self_assigns(
    client, create_animal, submit_application, auth_headers, seeded_volunteers
):
    application = await _application(create_animal, submit_application)
    resp = await client.post(
        "/api/interviews/",
        json={"application_id": application["id"]},
        headers=auth_headers("interviewer"),
    )
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["volunteer_id"] == str(seeded_volunteers["interviewer"].id)
    assert body["volunteer_name"] == "Ivy Interviewer"
    assert body["final_decision"] == "pending"
    assert body["interview_time"] is None
    assert body["application"]["id"] == application["id"]
    assert body["application"]["full_name"] == "Jamie Adopter"


async def test_admin_must_name_a_suitable_interviewer(
    client, create_animal, submit_application, auth_headers, seeded_volunteers
):
    application = await _application(create_animal, submit_application)
    headers = auth_headers("admin")

    missing = await client.post(
        "/api/interviews/", json={"application_id": application["id"]}, headers=headers
    )
    assert missing.status_code == 400

    foster = await client.post(
        "/api/interviews/",
        json={"application_id": application["id"], "volunteer_id": str(seeded_volunteers["foster"].id)},
        headers=headers,
    )
    assert foster.status_code == 400

    unknown = await client.post(
        "/api/interviews/",
        json={
            "application_id": application["id"],
            "volunteer_id": "00000000-0000-0000-0000-000000000002",
        },
        headers=headers,
    )
    assert unknown.status_code == 404

    ok = await client.post(
        "/api/interviews/",
        json={
            "application_id": application["id"],
            "volunteer_id": str(seeded_volunteers["interviewer"].id),
            "interview_time": "2026-11-01T10:00:00Z",
        },
        headers=headers,
    )
    assert ok.status_code == 201, ok.text
    assert ok.json()["interview_time"] is not None


async def test_foster_cannot_schedule(client, create_animal, submit_application, auth_headers):
    application = await _application(create_animal, submit_application)
    resp = await client.post(
        "/api/interviews/",
        json={"application_id": application["id"]},
        headers=auth_headers("foster"),
    )
    assert resp.status_code == 403


async def test_unknown_application_is_404(client, auth_headers):
    resp = await client.post(
        "/api/interviews/",
        json={"application_id": "00000000-0000-0000-0000-000000000003"},
        headers=auth_headers("interviewer"),
    )
    assert resp.status_code == 404


async def test_update_rules(
    client, create_animal, submit_application, auth_headers, seeded_volunteers
):
    application = await _application(create_animal, submit_application)
    created = await client.post(
        "/api/interviews/",
        json={"application_id": application["id"]},
        headers=auth_headers("interviewer"),
    )
    interview_id = created.json()["id"]
    url = f"/api/interviews/{interview_id}"
    headers = auth_headers("interviewer")

    scheduled = await client.put(
        url,
        json={"interview_time": "2026-11-02T15:30:00Z", "interview_result": "Great fit"},
        headers=headers,
    )
    assert scheduled.status_code == 200, scheduled.text
    assert scheduled.json()["interview_result"] == "Great fit"

    reschedule = await client.put(url, json={"interview_time": "2026-11-03T15:30:00Z"}, headers=headers)
    assert reschedule.status_code == 400

    decision = await client.put(url, json={"final_decision": "approved"}, headers=headers)
    assert decision.status_code == 403

    admin = await client.put(url, json={"final_decision": "approved"}, headers=auth_headers("admin"))
    assert admin.status_code == 200
    assert admin.json()["final_decision"] == "approved"

    audit = await client.get(
        "/api/audit-logs/",
        params={"entity_type": "INTERVIEW", "entity_id": interview_id},
        headers=auth_headers("admin"),
    )
    decisions = [e for e in audit.json() if e["action"] == "final_decision"]
    assert decisions[0]["to_value"] == {"final_decision": "approved"}


async def test_visibility(client, create_animal, submit_application, auth_headers, seeded_volunteers):
    application = await _application(create_animal, submit_application)
    created = await client.post(
        "/api/interviews/",
        json={
            "application_id": application["id"],
            "volunteer_id": str(seeded_volunteers["admin"].id),
        },
        headers=auth_headers("admin"),
    )
    interview_id = created.json()["id"]

    mine = await client.get("/api/interviews/", headers=auth_headers("interviewer"))
    assert mine.status_code == 200
    assert mine.json() == []

    forbidden = await client.get(f"/api/interviews/{interview_id}", headers=auth_headers("interviewer"))
    assert forbidden.status_code == 403

    every = await client.get("/api/interviews/", headers=auth_headers("admin"))
    assert [i["id"] for i in every.json()] == [interview_id]

    by_application = await client.get(
        f"/api/interviews/application/{application['id']}", headers=auth_headers("admin")
    )
    assert [i["id"] for i in by_application.json()] == [interview_id]
    not_admin = await client.get(
        f"/api/interviews/application/{application['id']}", headers=auth_headers("interviewer")
    )
    assert not_admin.status_code == 403


async def test_delete_interview(client, create_animal, submit_application, auth_headers):
    application = await _application(create_animal, submit_application)
    created = await client.post(
        "/api/interviews/",
        json={"application_id": application["id"]},
        headers=auth_headers("interviewer"),
    )
    interview_id = created.json()["id"]
    denied = await client.delete(f"/api/interviews/{interview_id}", headers=auth_headers("interviewer"))
    assert denied.status_code == 403
    resp = await client.delete(f"/api/interviews/{interview_id}", headers=auth_headers("admin"))
    assert resp.status_code == 204

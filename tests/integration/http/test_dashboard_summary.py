from __future__ import annotations


async def test_admin_summary(client, create_animal, submit_application, auth_headers, seeded_volunteers):
    published = await create_animal(status="Published")
    await create_animal(status="Fostering")
    await create_animal(status="Adopted")
    await submit_application(published["unique_id"])

    resp = await client.get("/api/dashboard/summary", headers=auth_headers("admin"))
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["role"] == "admin"
    assert body["total_animals"] == 3
    assert body["available_animals"] == 1
    assert body["in_foster_care"] == 1
    assert body["pending_applications"] == 1
    assert body["recently_adopted"] == 1
    assert body["interviews_scheduled"] == 0
    assert body["admin"] == {
        "volunteers": len(seeded_volunteers),
        "contracts_awaiting_signature": 0,
    }
    assert body["foster"] is None


async def test_foster_summary_counts_own_animals(client, create_animal, auth_headers):
    await create_animal("foster", status="Fostering")
    await create_animal("foster", status="Fostering")
    await create_animal("foster")
    await create_animal("foster2")

    resp = await client.get("/api/dashboard/summary", headers=auth_headers("foster"))
    body = resp.json()
    assert body["admin"] is None
    assert body["foster"]["my_animals"] == 3
    assert body["foster"]["my_animals_by_status"] == {"Fostering": 2, "Draft": 1}


async def test_interviewer_summary(client, create_animal, submit_application, auth_headers):
    animal = await create_animal(status="Published")
    application = await submit_application(animal["unique_id"])
    await client.post(
        "/api/interviews/",
        json={"application_id": application["id"], "interview_time": "2026-12-01T09:00:00Z"},
        headers=auth_headers("interviewer"),
    )

    resp = await client.get("/api/dashboard/summary", headers=auth_headers("interviewer"))
    body = resp.json()
    assert body["interviews_scheduled"] == 1
    assert body["interviewer"]["my_pending_interviews"] == 1
    assert body["interviewer"]["my_interviews"] == 1


async def test_summary_requires_auth(client):
    resp = await client.get("/api/dashboard/summary")
    assert resp.status_code == 401

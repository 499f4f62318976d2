from __future__ import annotations


async def test_health_reports_database(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["version"]
    assert body["timestamp"]


async def test_request_id_is_echoed(client):
    resp = await client.get("/api/animals/available", headers={"X-Request-ID": "req-123"})
    assert resp.headers["X-Request-ID"] == "req-123"
    generated = await client.get("/api/animals/available")
    assert generated.headers["X-Request-ID"]


async def test_audit_log_is_admin_only(client, create_animal, auth_headers):
    animal = await create_animal()
    assert (await client.get("/api/audit-logs/", headers=auth_headers("foster"))).status_code == 403

    resp = await client.get("/api/audit-logs/", headers=auth_headers("admin"))
    assert resp.status_code == 200
    entries = resp.json()
    assert entries[0]["entity_type"] == "ANIMAL"
    assert entries[0]["entity_id"] == animal["unique_id"]
    assert entries[0]["action"] == "created"

from __future__ import annotations

import json
from urllib.parse import unquote


async def test_login_sets_cookies_and_returns_volunteer(client, seeded_volunteers):
    response = await client.post(
        "/api/auth/login", json={"email": "ADMIN@example.com", "password": "password123"}
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["token_type"] == "bearer"
    assert body["volunteer"]["email"] == "admin@example.com"
    assert body["volunteer"]["role"] == "admin"
    assert "hashed_password" not in body["volunteer"]

    assert client.cookies.get("auth_token") == body["access_token"]
    info = json.loads(unquote(client.cookies.get("user_info")))
    assert info["email"] == "admin@example.com"
    assert info["role"] == ["admin"]
    assert info["isAuthenticated"] is True
    set_cookie = response.headers.get_list("set-cookie")
    assert any(h.startswith("auth_token=") and "HttpOnly" in h for h in set_cookie)


async def test_login_rejects_wrong_password(client, seeded_volunteers):
    response = await client.post(
        "/api/auth/login", json={"email": "admin@example.com", "password": "nope-nope"}
    )
    assert response.status_code == 401
    assert response.json() == {"code": "auth_error", "message": "Invalid credentials"}


async def test_login_rejects_inactive_volunteer(client, auth_headers, seeded_volunteers):
    foster_id = seeded_volunteers["foster"].id
    resp = await client.put(
        f"/api/volunteers/{foster_id}", json={"status": "inactive"}, headers=auth_headers("admin")
    )
    assert resp.status_code == 200, resp.text
    login = await client.post(
        "/api/auth/login", json={"email": "foster@example.com", "password": "password123"}
    )
    assert login.status_code == 401
    # Existing tokens stop working as well
    me = await client.get("/api/auth/me", headers=auth_headers("foster"))
    assert me.status_code == 401


async def test_cookie_session_reaches_protected_routes(client, seeded_volunteers):
    login = await client.post(
        "/api/auth/login", json={"email": "foster@example.com", "password": "password123"}
    )
    assert login.status_code == 200
    verify = await client.get("/api/auth/verify")
    assert verify.status_code == 200
    body = verify.json()
    assert body["message"] == "Token is valid"
    assert body["user"]["sub"] == str(seeded_volunteers["foster"].id)
    assert body["user"]["role"] == "foster"

    logout = await client.post("/api/auth/logout")
    assert logout.status_code == 200
    assert client.cookies.get("auth_token") is None
    after = await client.get("/api/auth/verify")
    assert after.status_code == 401


async def test_me_requires_authentication(client, seeded_volunteers):
    response = await client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json()["message"] == "Authentication required"


async def test_invalid_token_is_rejected(client, seeded_volunteers):
    response = await client.get(
        "/api/auth/me", headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


async def test_me_returns_current_volunteer(client, auth_headers, seeded_volunteers):
    response = await client.get("/api/auth/me", headers=auth_headers("interviewer"))
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == str(seeded_volunteers["interviewer"].id)
    assert body["full_name"] == "Ivy Interviewer"
    assert body["role"] == "interviewer"


async def test_change_password_flow(client, auth_headers):
    headers = auth_headers("foster")
    wrong = await client.post(
        "/api/auth/change-password",
        json={"current_password": "wrong-pass", "new_password": "brand-new-pass"},
        headers=headers,
    )
    assert wrong.status_code == 401

    ok = await client.post(
        "/api/auth/change-password",
        json={"current_password": "password123", "new_password": "brand-new-pass"},
        headers=headers,
    )
    assert ok.status_code == 200, ok.text

    old_login = await client.post(
        "/api/auth/login", json={"email": "foster@example.com", "password": "password123"}
    )
    assert old_login.status_code == 401
    new_login = await client.post(
        "/api/auth/login", json={"email": "foster@example.com", "password": "brand-new-pass"}
    )
    assert new_login.status_code == 200

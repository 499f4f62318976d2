from __future__ import annotations

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


async def _upload(client, uid: str, headers, *, name="photo.png", content_type="image/png", data=PNG_BYTES):
    return await client.post(
        f"/api/animals/{uid}/photos",
        files={"file": (name, data, content_type)},
        headers=headers,
    )


async def test_first_upload_becomes_primary(client, create_animal, auth_headers, storage):
    animal = await create_animal("foster")
    uid = animal["unique_id"]
    headers = auth_headers("foster")

    first = await _upload(client, uid, headers)
    assert first.status_code == 201, first.text
    body = first.json()
    assert body["message"] == "Photo uploaded successfully"
    assert body["photo"]["is_primary"] is True
    assert body["url"].startswith(f"https://cdn.test/animals/{uid}/")
    assert body["url"].endswith(".png")
    assert len(storage.objects) == 1

    second = await _upload(client, uid, headers, name="two.jpg", content_type="image/jpeg")
    assert second.status_code == 201
    assert second.json()["photo"]["is_primary"] is False

    detail = await client.get(f"/api/animals/{uid}")
    assert detail.json()["image_urls"] == [body["url"], second.json()["url"]]


async def test_rejects_non_images_and_large_files(client, create_animal, auth_headers):
    animal = await create_animal()
    uid = animal["unique_id"]
    headers = auth_headers("admin")

    text = await _upload(client, uid, headers, name="notes.txt", content_type="text/plain")
    assert text.status_code == 422
    too_big = await _upload(client, uid, headers, data=b"x" * 2048)
    assert too_big.status_code == 422
    assert too_big.json()["message"] == "File too large"


async def test_other_foster_cannot_upload(client, create_animal, auth_headers):
    animal = await create_animal("foster")
    resp = await _upload(client, animal["unique_id"], auth_headers("foster2"))
    assert resp.status_code == 403


async def test_set_primary_and_delete_promotes_next(client, create_animal, auth_headers, storage):
    animal = await create_animal()
    uid = animal["unique_id"]
    headers = auth_headers("admin")
    first = (await _upload(client, uid, headers)).json()["photo"]
    second = (await _upload(client, uid, headers)).json()["photo"]

    primary = await client.put(f"/api/animals/{uid}/photos/{second['id']}/primary", headers=headers)
    assert primary.status_code == 200
    photos = primary.json()
    assert photos[0]["id"] == second["id"]
    assert photos[0]["is_primary"] is True
    assert [p["is_primary"] for p in photos] == [True, False]

    removed = await client.delete(f"/api/animals/{uid}/photos/{second['id']}", headers=headers)
    assert removed.status_code == 204
    assert len(storage.deleted) == 1

    remaining = await client.get(f"/api/animals/{uid}/photos")
    assert remaining.status_code == 200
    assert [(p["id"], p["is_primary"]) for p in remaining.json()] == [(first["id"], True)]


async def test_deleting_animal_cleans_up_objects(client, create_animal, auth_headers, storage):
    animal = await create_animal()
    uid = animal["unique_id"]
    headers = auth_headers("admin")
    await _upload(client, uid, headers)
    await _upload(client, uid, headers)

    resp = await client.delete(f"/api/animals/{uid}", headers=headers)
    assert resp.status_code == 204
    assert len(storage.deleted) == 2
    assert storage.objects == {}


async def test_upload_after_delete_takes_next_free_position(client, create_animal, auth_headers):
    animal = await create_animal()
    uid = animal["unique_id"]
    headers = auth_headers("admin")
    uploaded = [(await _upload(client, uid, headers)).json()["photo"] for _ in range(3)]
    assert [p["position"] for p in uploaded] == [0, 1, 2]

    removed = await client.delete(f"/api/animals/{uid}/photos/{uploaded[1]['id']}", headers=headers)
    assert removed.status_code == 204

    latest = (await _upload(client, uid, headers)).json()["photo"]
    assert latest["position"] == 3
    listed = (await client.get(f"/api/animals/{uid}/photos")).json()
    assert [p["id"] for p in listed] == [uploaded[0]["id"], uploaded[2]["id"], latest["id"]]

from __future__ import annotations

import logging
from typing import Sequence
from uuid import UUID

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status

from src.application.use_cases.animals import (
    change_animal_state,
    create_animal,
    delete_animal,
    delete_photo,
    get_animal,
    list_animals,
    list_photos,
    set_primary_photo,
    update_animal,
    upload_photo,
)
from src.config.settings import Settings
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_status import AnimalStatus
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.storage.ports import StorageService
from src.interfaces.http.deps import (
    get_app_settings,
    get_auth_context,
    get_optional_auth_context,
    get_storage_service,
    get_uow,
)
from src.interfaces.http.schemas.animals import (
    AnimalCreate,
    AnimalResponse,
    AnimalsListResponse,
    AnimalStateUpdate,
    AnimalSummary,
    AnimalUpdate,
    PhotoResponse,
    PhotoUploadResponse,
    PublicAnimalResponse,
)

router = APIRouter(prefix="/animals", tags=["animals"])
logger = logging.getLogger(__name__)


async def load_image_urls(uow, animals: Sequence[Animal]) -> dict[UUID, list[str]]:
    """Photo urls per animal id, primary first."""
    if not animals:
        return {}
    photos = await uow.animal_photos.list_for_animals([a.id for a in animals])
    return {animal_id: [p.url for p in items] for animal_id, items in photos.items()}


def build_summary(animal: Animal, image_urls: list[str] | None = None) -> AnimalSummary:
    return AnimalSummary(
        unique_id=animal.unique_id,
        name=animal.name,
        species=animal.species,
        status=animal.status,
        image_urls=image_urls or [],
    )


async def _present(uow, animals: Sequence[Animal], model=AnimalResponse) -> list:
    urls = await load_image_urls(uow, animals)
    results = []
    for animal in animals:
        data = model.model_validate(animal).model_dump()
        data["image_urls"] = urls.get(animal.id, [])
        results.append(model.model_validate(data))
    return results


@router.get("/available", response_model=list[PublicAnimalResponse])
async def list_available_animals(uow=Depends(get_uow)) -> list[PublicAnimalResponse]:
    animals = await list_animals.list_available(uow)
    return await _present(uow, animals, PublicAnimalResponse)


@router.get("/adopted", response_model=list[PublicAnimalResponse])
async def list_adopted_animals(uow=Depends(get_uow)) -> list[PublicAnimalResponse]:
    animals = await list_animals.list_adopted(uow)
    return await _present(uow, animals, PublicAnimalResponse)


@router.get("/", response_model=AnimalsListResponse)
async def list_all(
    status_filter: list[AnimalStatus] | None = Query(default=None, alias="status"),
    volunteer_id: UUID | None = Query(default=None),
    q: str | None = Query(default=None, description="Search by name, breed, species or id"),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalsListResponse:
    result = await list_animals.execute(
        uow,
        statuses=status_filter,
        volunteer_id=volunteer_id,
        search=q,
        limit=limit,
        offset=offset,
    )
    items = await _present(uow, result.items)
    return AnimalsListResponse(items=items, total=result.total, limit=limit, offset=offset)


@router.post("/", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create(
    payload: AnimalCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await create_animal.execute(
        uow,
        context.role,
        context.volunteer_id,
        create_animal.CreateAnimalInput(**payload.model_dump()),
    )
    return AnimalResponse.model_validate(animal)


# response_model=None so the public variant is serialized without internal notes
@router.get("/{unique_id}", response_model=None)
async def get_one(
    unique_id: str,
    context: AuthContext | None = Depends(get_optional_auth_context),
    uow=Depends(get_uow),
) -> PublicAnimalResponse:
    animal = await get_animal.execute(uow, unique_id)
    model = AnimalResponse if context is not None else PublicAnimalResponse
    (result,) = await _present(uow, [animal], model)
    return result


@router.put("/{unique_id}", response_model=AnimalResponse)
async def update(
    unique_id: str,
    payload: AnimalUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await update_animal.execute(
        uow,
        context.role,
        context.volunteer_id,
        unique_id,
        update_animal.UpdateAnimalInput(**payload.model_dump(exclude_unset=True)),
    )
    (result,) = await _present(uow, [animal])
    return result


@router.patch("/{unique_id}/state", response_model=AnimalResponse)
async def change_state(
    unique_id: str,
    payload: AnimalStateUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await change_animal_state.execute(
        uow, context.role, context.volunteer_id, unique_id, payload.status
    )
    (result,) = await _present(uow, [animal])
    return result


@router.delete("/{unique_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(
    unique_id: str,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    storage: StorageService | None = Depends(get_storage_service),
) -> Response:
    keys = await delete_animal.execute(uow, context.role, context.volunteer_id, unique_id)
    await delete_photo.remove_objects(storage, keys)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{unique_id}/photos", response_model=list[PhotoResponse])
async def get_photos(unique_id: str, uow=Depends(get_uow)) -> list[PhotoResponse]:
    photos = await list_photos.execute(uow, unique_id)
    return [PhotoResponse.model_validate(p) for p in photos]


@router.post(
    "/{unique_id}/photos",
    response_model=PhotoUploadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload(
    unique_id: str,
    file: UploadFile = File(...),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    storage: StorageService | None = Depends(get_storage_service),
    settings: Settings = Depends(get_app_settings),
) -> PhotoUploadResponse:
    data = await file.read()
    photo = await upload_photo.execute(
        uow,
        storage,
        context.role,
        context.volunteer_id,
        unique_id,
        upload_photo.UploadPhotoInput(
            filename=file.filename, content_type=file.content_type, data=data
        ),
        max_bytes=settings.max_photo_bytes,
    )
    return PhotoUploadResponse(
        message="Photo uploaded successfully",
        url=photo.url,
        photo=PhotoResponse.model_validate(photo),
    )


@router.delete("/{unique_id}/photos/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_photo(
    unique_id: str,
    photo_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    storage: StorageService | None = Depends(get_storage_service),
) -> Response:
    await delete_photo.execute(
        uow, storage, context.role, context.volunteer_id, unique_id, photo_id
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{unique_id}/photos/{photo_id}/primary", response_model=list[PhotoResponse])
async def make_primary(
    unique_id: str,
    photo_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[PhotoResponse]:
    photos = await set_primary_photo.execute(
        uow, context.role, context.volunteer_id, unique_id, photo_id
    )
    return [PhotoResponse.model_validate(p) for p in photos]

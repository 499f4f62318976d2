from __future__ import annotations

from typing import Protocol


class StorageService(Protocol):
    async def put_object(
        self, key: str, data: bytes, content_type: str, *, public: bool = True
    ) -> str: ...

    async def delete_object(self, key: str) -> None: ...

    async def get_public_url(self, key: str) -> str: ...

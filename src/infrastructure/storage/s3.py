from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlparse

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.application.errors import InfrastructureError
from src.infrastructure.storage.ports import StorageService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class S3StorageService(StorageService):
    """S3-compatible object storage (AWS S3 or DigitalOcean Spaces via `endpoint_url`)."""

    bucket: str
    region: str
    endpoint_url: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = None
    prefix: str = ""
    public_url_base: str | None = None
    _s3: Any = field(init=False, repr=False, default=None)

    def __post_init__(self) -> None:
        self._s3 = boto3.client(
            "s3",
            region_name=self.region,
            endpoint_url=self.endpoint_url,
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
        )

    def _full_key(self, key: str) -> str:
        if self.prefix and not key.startswith(self.prefix):
            return f"{self.prefix}{key}"
        return key

    async def get_public_url(self, key: str) -> str:
        full_key = self._full_key(key)
        if self.public_url_base:
            base = self.public_url_base.rstrip("/")
            return f"{base}/{full_key}"
        if self.endpoint_url:
            # Virtual-hosted style, e.g. https://<bucket>.nyc3.digitaloceanspaces.com/<key>
            parsed = urlparse(self.endpoint_url)
            scheme = parsed.scheme or "https"
            host = parsed.netloc or parsed.path
            return f"{scheme}://{self.bucket}.{host}/{full_key}"
        # default AWS URL
        if self.region == "us-east-1":
            return f"https://{self.bucket}.s3.amazonaws.com/{full_key}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{full_key}"

    async def put_object(
        self, key: str, data: bytes, content_type: str, *, public: bool = True
    ) -> str:
        full_key = self._full_key(key)
        params = {
            "Bucket": self.bucket,
            "Key": full_key,
            "Body": data,
            "ContentType": content_type,
        }
        if public:
            params["ACL"] = "public-read"
        try:
            await asyncio.to_thread(self._s3.put_object, **params)
        except (BotoCoreError, ClientError) as exc:
            logger.error("S3 upload failed for %s: %s", full_key, exc)
            raise InfrastructureError("Failed to upload file to storage") from exc
        return full_key

    async def delete_object(self, key: str) -> None:
        full_key = self._full_key(key)
        try:
            await asyncio.to_thread(self._s3.delete_object, Bucket=self.bucket, Key=full_key)
        except (BotoCoreError, ClientError) as exc:
            raise InfrastructureError("Failed to delete file from storage") from exc

"""Cloudinary media host adapter.

Uses the signed ``image/destroy`` upload API over HTTP. Cloudinary signs a
request by SHA-1 hashing the alphabetically sorted parameters followed by the
API secret.
"""

import hashlib
import time

import httpx

from storefront.media.port import ImageHost, MediaHostError, ReleaseResult
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

API_BASE = "https://api.cloudinary.com/v1_1"


def sign_params(params: dict[str, str], api_secret: str) -> str:
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode()).hexdigest()


class CloudinaryImageHost(ImageHost):
    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        client: httpx.Client | None = None,
    ) -> None:
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.client = client or httpx.Client(timeout=10.0)

    def release(self, storage_id: str) -> ReleaseResult:
        params = {"public_id": storage_id, "timestamp": str(int(time.time()))}
        payload = {
            **params,
            "api_key": self.api_key,
            "signature": sign_params(params, self.api_secret),
        }

        try:
            response = self.client.post(f"{API_BASE}/{self.cloud_name}/image/destroy", data=payload)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("media_release_failed", storage_id=storage_id, error=str(exc))
            raise MediaHostError(f"Failed to release image {storage_id}: {exc}") from exc

        outcome = response.json().get("result")
        logger.info("media_released", storage_id=storage_id, result=outcome)
        return ReleaseResult(storage_id=storage_id, released=outcome == "ok", detail=outcome)

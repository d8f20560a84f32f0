"""Async client for the temporary image endpoints of the backend."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from .exceptions import TempImageError
from .utils import detect_image_type

logger = logging.getLogger(__name__)

UPLOAD_PATH = "/api/upload-temp-image"
DELETE_PATH = "/api/delete-temp-image"


class TempImageClient:
    """Uploads images to the backend temp store and deletes them again."""

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient()
        self._owns_client = client is None

    async def upload(self, path: str | Path, content_type: Optional[str] = None) -> str:
        """Upload ``path`` and return the public URL the backend serves it at."""

        path = Path(path)
        content_type = content_type or detect_image_type(path) or "application/octet-stream"
        files = {"image": (path.name, path.read_bytes(), content_type)}
        response = await self._client.post(f"{self.base_url}{UPLOAD_PATH}", files=files)
        if response.is_error:
            raise TempImageError(
                f"Upload failed ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise TempImageError("Upload returned a non-JSON response", status_code=response.status_code) from exc

        image_url = data.get("imageUrl") if isinstance(data, dict) else None
        if not image_url:
            raise TempImageError("Upload response did not include an imageUrl")
        logger.debug("Uploaded %s to %s", path.name, image_url)
        return image_url

    async def delete(self, image_url: str) -> None:
        response = await self._client.post(f"{self.base_url}{DELETE_PATH}", json={"imageUrl": image_url})
        if response.is_error:
            raise TempImageError(
                f"Delete failed ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )
        logger.debug("Deleted temp image %s", image_url)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

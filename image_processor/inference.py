"""Client for the hosted remove-background inference workflow."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .config import DEFAULT_INFERENCE_URL, DEFAULT_WORKFLOW
from .exceptions import InferenceError

logger = logging.getLogger(__name__)


class InferenceClient:
    """Sends an image URL to the workflow and returns the processed image URL."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_INFERENCE_URL,
        workflow: str = DEFAULT_WORKFLOW,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = 60.0,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.workflow = workflow.strip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/infer/workflows/{self.workflow}"

    def build_payload(self, image_url: str) -> Dict[str, Any]:
        return {
            "api_key": self.api_key,
            "inputs": {
                "image": {"type": "url", "value": image_url},
            },
        }

    async def remove_background(self, image_url: str) -> str:
        response = await self._client.post(self.endpoint, json=self.build_payload(image_url))
        if response.is_error:
            raise InferenceError(f"API request failed with status {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise InferenceError("API returned a non-JSON response") from exc

        output_url = data.get("output_url") if isinstance(data, dict) else None
        if not output_url:
            raise InferenceError("API response did not include an output_url")
        logger.info("Background removed: %s -> %s", image_url, output_url)
        return output_url

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

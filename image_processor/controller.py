"""State machine driving one background removal session.

A session holds at most one temporary upload on the backend. Choosing a new
file, calling :meth:`ImageProcessor.release` or leaving the ``async with``
block deletes it again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import httpx

from .backend import TempImageClient
from .exceptions import ImageProcessorError, UnsupportedImageError
from .inference import InferenceClient
from .utils import detect_image_type

logger = logging.getLogger(__name__)


class ProcessorState(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    PROCESSING = "processing"
    DONE = "done"
    ERROR = "error"


@dataclass
class SessionImagePair:
    """The images shown for the current selection."""

    original: Optional[str] = None
    temp_url: Optional[str] = None
    processed: Optional[str] = None


StateCallback = Callable[[ProcessorState, SessionImagePair], None]


class ImageProcessor:
    def __init__(
        self,
        backend: TempImageClient,
        inference: InferenceClient,
        on_state_change: Optional[StateCallback] = None,
    ) -> None:
        self.backend = backend
        self.inference = inference
        self._on_state_change = on_state_change
        self._state = ProcessorState.IDLE
        self._images = SessionImagePair()
        self.last_error: Optional[BaseException] = None

    @property
    def state(self) -> ProcessorState:
        return self._state

    @property
    def images(self) -> SessionImagePair:
        return self._images

    @property
    def is_processing(self) -> bool:
        return self._state in {ProcessorState.UPLOADING, ProcessorState.PROCESSING}

    async def submit(self, path: str | Path) -> SessionImagePair:
        """Upload ``path``, run background removal on it and return the result.

        Failures after the file was accepted are logged and leave the
        processor in the ``error`` state; they are not raised.
        """

        path = Path(path)
        if detect_image_type(path) is None:
            raise UnsupportedImageError(f"{path.name} is not an image")

        await self.release()
        self._images = SessionImagePair(original=str(path))
        self.last_error = None
        self._transition(ProcessorState.UPLOADING)

        try:
            image_url = await self.backend.upload(path)
            self._images.temp_url = image_url
            self._transition(ProcessorState.PROCESSING)
            self._images.processed = await self.inference.remove_background(image_url)
        except (ImageProcessorError, httpx.HTTPError, OSError) as exc:
            logger.exception("Error processing image %s", path.name)
            self.last_error = exc
            self._transition(ProcessorState.ERROR)
        else:
            self._transition(ProcessorState.DONE)
        return self._images

    async def release(self) -> None:
        """Delete the current temporary upload, if any. Errors are only logged."""

        image_url = self._images.temp_url
        if not image_url:
            return
        self._images.temp_url = None
        try:
            await self.backend.delete(image_url)
        except (ImageProcessorError, httpx.HTTPError) as exc:
            logger.warning("Failed to delete temporary image %s: %s", image_url, exc)

    async def reset(self) -> None:
        await self.release()
        self._images = SessionImagePair()
        self.last_error = None
        self._transition(ProcessorState.IDLE)

    async def close(self) -> None:
        """Release the temporary upload, then close the underlying HTTP clients."""

        try:
            await self.release()
        finally:
            await self.backend.aclose()
            await self.inference.aclose()

    async def __aenter__(self) -> "ImageProcessor":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def _transition(self, state: ProcessorState) -> None:
        logger.debug("Processor state %s -> %s", self._state.value, state.value)
        self._state = state
        if self._on_state_change is not None:
            self._on_state_change(state, self._images)

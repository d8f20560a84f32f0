"""Custom exceptions for the image processor client."""

from __future__ import annotations

from typing import Optional


class ImageProcessorError(Exception):
    """Base exception for all image processor related errors."""


class UnsupportedImageError(ImageProcessorError):
    """Raised when the selected file is not an image."""


class TempImageError(ImageProcessorError):
    """Raised when the temp-image backend rejects an upload or delete."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InferenceError(ImageProcessorError):
    """Raised when the background removal API fails or returns no output."""

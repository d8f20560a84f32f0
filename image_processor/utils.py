"""Utility helpers for the image processor client."""

from __future__ import annotations

import mimetypes
import re
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

from PIL import Image, UnidentifiedImageError


def normalize_file_name(path: str | Path) -> str:
    """Normalize an arbitrary file path or name into a filesystem friendly stem.

    The result is lowercase, stripped of leading/trailing underscores, and only
    contains ASCII letters, numbers, hyphens, and underscores.
    """

    stem = Path(path).stem
    normalized = re.sub(r"[^a-zA-Z0-9_-]+", "_", stem).strip("_").lower()
    return normalized or "image"


def detect_image_type(path: str | Path) -> Optional[str]:
    """Return the ``image/*`` MIME type of ``path`` or ``None`` if it is not an image.

    The file content is sniffed with Pillow first; formats Pillow cannot open
    (SVG for instance) fall back to the extension.
    """

    try:
        with Image.open(path) as image:
            mime = Image.MIME.get(image.format or "")
    except (UnidentifiedImageError, OSError):
        mime = None
    if mime is None:
        mime, _ = mimetypes.guess_type(str(path))
    if mime and mime.startswith("image/"):
        return mime
    return None


def download_name(url: str, content_type: Optional[str] = None) -> str:
    """Build a local filename for an image fetched from ``url``."""

    remote = Path(urlsplit(url).path)
    suffix = remote.suffix.lower()
    if not suffix and content_type:
        suffix = mimetypes.guess_extension(content_type.split(";")[0].strip()) or ""
    return f"{normalize_file_name(remote.name or 'image')}{suffix or '.png'}"

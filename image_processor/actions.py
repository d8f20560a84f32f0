"""Download and copy actions for a processed image."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import httpx

from .utils import download_name

logger = logging.getLogger(__name__)

AlertFunc = Callable[[str], None]
ClipboardFunc = Callable[[bytes, str], None]


def default_alert(message: str) -> None:
    print(message, file=sys.stderr)


async def _fetch(client: httpx.AsyncClient, url: str) -> httpx.Response:
    response = await client.get(url)
    response.raise_for_status()
    return response


async def download_image(
    client: httpx.AsyncClient,
    url: str,
    destination: str | Path,
    alert: AlertFunc = default_alert,
) -> Optional[Path]:
    """Save the image at ``url`` to ``destination``.

    When ``destination`` is an existing directory the filename is derived
    from the URL. Returns the written path, or ``None`` after alerting.
    """

    try:
        response = await _fetch(client, url)
        target = Path(destination)
        if target.is_dir():
            target = target / download_name(url, response.headers.get("content-type"))
        target.write_bytes(response.content)
    except (httpx.HTTPError, OSError) as exc:
        logger.error("Failed to download image %s: %s", url, exc)
        alert("Failed to download image. Please try again.")
        return None
    logger.info("Downloaded %s to %s", url, target)
    return target


async def copy_image(
    client: httpx.AsyncClient,
    url: str,
    clipboard: ClipboardFunc,
    alert: AlertFunc = default_alert,
) -> bool:
    """Put the image at ``url`` on ``clipboard``. Returns ``False`` after alerting."""

    try:
        response = await _fetch(client, url)
        content_type = response.headers.get("content-type", "image/png").split(";")[0].strip()
        clipboard(response.content, content_type)
    except Exception as exc:  # noqa: BLE001
        logger.error("Failed to copy image %s: %s", url, exc)
        alert("Failed to copy image to clipboard.")
        return False
    return True

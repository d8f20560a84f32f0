from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from bgremover.models import TempFile
from bgremover.services.utils import generate_filename

logger = logging.getLogger(__name__)


class TempStore:
    """Directory of uploaded images waiting to be fetched or deleted.

    Nothing here expires files: a file stays until ``delete`` is called for it.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def initialize(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    async def save_upload(self, upload: UploadFile) -> TempFile:
        contents = await upload.read()
        await upload.close()
        return await self.save_bytes(
            contents,
            original_filename=upload.filename,
            content_type=upload.content_type,
        )

    async def save_bytes(
        self,
        contents: bytes,
        original_filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> TempFile:
        self.initialize()
        filename = generate_filename(original_filename)
        destination = self.root / filename
        await asyncio.to_thread(destination.write_bytes, contents)
        temp_file = TempFile(
            filename=filename,
            path=destination,
            size_bytes=len(contents),
            original_filename=original_filename,
            content_type=content_type,
        )
        logger.info("Stored temp image %s", temp_file.to_dict())
        return temp_file

    async def delete(self, filename: str) -> None:
        """Remove ``filename`` from the store.

        Raises ``FileNotFoundError`` when there is no such file and lets any
        other ``OSError`` from the unlink propagate.
        """
        if filename in {"", ".", ".."}:
            raise FileNotFoundError(filename)
        target = self.root / filename
        await asyncio.to_thread(target.unlink)
        logger.info("Deleted temp image %s", filename)

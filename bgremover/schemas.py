from __future__ import annotations

from pydantic import BaseModel


class TempImageResponse(BaseModel):
    imageUrl: str


class DeleteTempImageRequest(BaseModel):
    imageUrl: str

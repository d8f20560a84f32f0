from __future__ import annotations

import logging
from typing import Union

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.responses import PlainTextResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from bgremover.core.config import TEMP_ROUTE_NAME
from bgremover.dependencies import get_temp_store
from bgremover.schemas import DeleteTempImageRequest, TempImageResponse
from bgremover.services.temp_store import TempStore
from bgremover.services.utils import filename_from_url

logger = logging.getLogger(__name__)

api_router = APIRouter(prefix="/api", tags=["temp-images"])


@api_router.post(
    "/upload-temp-image",
    response_model=TempImageResponse,
    name="upload_temp_image",
    responses={status.HTTP_400_BAD_REQUEST: {"content": {"text/plain": {}}}},
)
async def upload_temp_image(
    request: Request,
    image: Union[UploadFile, str, None] = File(None),
    store: TempStore = Depends(get_temp_store),
):
    if not isinstance(image, StarletteUploadFile):
        return PlainTextResponse("No file uploaded.", status_code=status.HTTP_400_BAD_REQUEST)

    temp_file = await store.save_upload(image)
    image_url = str(request.url_for(TEMP_ROUTE_NAME, path=temp_file.filename))
    return TempImageResponse(imageUrl=image_url)


@api_router.post(
    "/delete-temp-image",
    response_class=PlainTextResponse,
    name="delete_temp_image",
)
async def delete_temp_image(
    body: DeleteTempImageRequest,
    store: TempStore = Depends(get_temp_store),
) -> PlainTextResponse:
    filename = filename_from_url(body.imageUrl)
    try:
        await store.delete(filename)
    except OSError as exc:
        logger.error("Error deleting file %r: %s", filename, exc)
        return PlainTextResponse(
            "Failed to delete temporary image.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return PlainTextResponse("Temporary image deleted successfully.")

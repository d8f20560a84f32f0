"""
Command-line front end: remove the background of one local image.

The image is uploaded to the temp-image backend, sent to the inference
workflow by URL, and the temporary upload is deleted afterwards unless
``--keep`` is given.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Optional, Sequence

import httpx

from .actions import download_image
from .backend import TempImageClient
from .config import get_client_settings
from .controller import ImageProcessor, ProcessorState, SessionImagePair
from .exceptions import UnsupportedImageError
from .inference import InferenceClient

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    settings = get_client_settings()
    parser = argparse.ArgumentParser(description="Remove the background of an image")
    parser.add_argument("image", help="Path to the input image")
    parser.add_argument("--output", help="File or directory to download the processed image to")
    parser.add_argument("--backend-url", default=settings.backend_url, help="Temp-image backend base URL")
    parser.add_argument("--keep", action="store_true", help="Do not delete the temporary upload")
    return parser.parse_args(argv)


def _report_state(state: ProcessorState, images: SessionImagePair) -> None:
    logger.info("%s: %s", state.value, images.original)


async def run(args: argparse.Namespace, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    settings = get_client_settings()
    async with httpx.AsyncClient(timeout=settings.inference_timeout, transport=transport) as client:
        processor = ImageProcessor(
            backend=TempImageClient(args.backend_url, client=client),
            inference=InferenceClient(
                settings.roboflow_api_key,
                base_url=settings.inference_url,
                workflow=settings.inference_workflow,
                client=client,
            ),
            on_state_change=_report_state,
        )
        try:
            images = await processor.submit(args.image)
            if processor.state is not ProcessorState.DONE or not images.processed:
                return 1

            print(images.processed)
            if args.output:
                written = await download_image(client, images.processed, Path(args.output))
                return 0 if written else 1
            return 0
        except UnsupportedImageError as exc:
            logger.error("%s", exc)
            return 1
        finally:
            if not args.keep:
                await processor.release()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_client_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
    if not settings.roboflow_api_key:
        logger.warning("ROBOFLOW_API_KEY is not set; the inference request will likely be rejected")
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())

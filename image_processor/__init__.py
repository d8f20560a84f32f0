"""Public API for the image processor package."""

from .actions import copy_image, default_alert, download_image
from .backend import TempImageClient
from .controller import ImageProcessor, ProcessorState, SessionImagePair
from .exceptions import ImageProcessorError, InferenceError, TempImageError, UnsupportedImageError
from .inference import InferenceClient
from . import utils

__all__ = [
    "ImageProcessor",
    "ImageProcessorError",
    "InferenceClient",
    "InferenceError",
    "ProcessorState",
    "SessionImagePair",
    "TempImageClient",
    "TempImageError",
    "UnsupportedImageError",
    "copy_image",
    "default_alert",
    "download_image",
    "utils",
]

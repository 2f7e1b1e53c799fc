"""统一图片编辑入口"""

from .base import EditProvider, EditRequest, EditResult, ImageBlob
from .client import ImageEditClient, edit_image_with_prompt
from .errors import (
    EditStatus,
    ImageEditError,
    InvalidImageError,
    MissingCredentialError,
    NoImageProducedError,
    ServiceError,
    UnknownEditError,
)
from .loader import fetch_image, image_from_bytes, image_from_data_url, load_image

__all__ = [
    "EditProvider",
    "EditRequest",
    "EditResult",
    "EditStatus",
    "ImageBlob",
    "ImageEditClient",
    "ImageEditError",
    "InvalidImageError",
    "MissingCredentialError",
    "NoImageProducedError",
    "ServiceError",
    "UnknownEditError",
    "edit_image_with_prompt",
    "fetch_image",
    "image_from_bytes",
    "image_from_data_url",
    "load_image",
]

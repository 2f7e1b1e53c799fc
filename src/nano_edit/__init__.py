"""Nano Edit - 基于 Gemini 的指令式图片编辑"""

from .config import EditConfig
from .image import (
    EditResult,
    EditStatus,
    ImageBlob,
    ImageEditClient,
    ImageEditError,
    edit_image_with_prompt,
)

__all__ = [
    "EditConfig",
    "EditResult",
    "EditStatus",
    "ImageBlob",
    "ImageEditClient",
    "ImageEditError",
    "edit_image_with_prompt",
]

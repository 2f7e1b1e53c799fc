"""从文件、字节、data URL 或远程 URL 构造 ImageBlob"""

import io
import logging
import re
from pathlib import Path

import httpx
from PIL import Image, UnidentifiedImageError

from .base import ImageBlob
from .errors import InvalidImageError

logger = logging.getLogger(__name__)

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.+)$", re.S)


def sniff_mime_type(data: bytes) -> str:
    """用 Pillow 识别图片格式，非图片抛 InvalidImageError"""
    try:
        img = Image.open(io.BytesIO(data))
        img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise InvalidImageError(f"不是可识别的图片: {exc}") from exc
    mime = Image.MIME.get(img.format or "")
    if not mime:
        raise InvalidImageError(f"不支持的图片格式: {img.format}")
    return mime


def image_from_bytes(data: bytes, mime_type: str | None = None) -> ImageBlob:
    """原始字节转 ImageBlob，mime_type 缺省时自动识别"""
    if not data:
        raise InvalidImageError("图片内容为空")
    if mime_type is None:
        mime_type = sniff_mime_type(data)
    elif not mime_type.startswith("image/"):
        raise InvalidImageError(f"不是图片类型: {mime_type}")
    return ImageBlob.from_bytes(data, mime_type)


def load_image(path: str | Path) -> ImageBlob:
    """读取本地图片文件"""
    data = Path(path).read_bytes()
    logger.debug("读取图片: %s (%d bytes)", path, len(data))
    return image_from_bytes(data)


def image_from_data_url(url: str) -> ImageBlob:
    """解析 data:<mime>;base64,<data> 格式"""
    match = _DATA_URL_RE.match(url.strip())
    if not match:
        raise InvalidImageError("不是 base64 data URL")
    mime_type = match.group("mime")
    if not mime_type.startswith("image/"):
        raise InvalidImageError(f"不是图片类型: {mime_type}")
    return ImageBlob(data=match.group("data"), mime_type=mime_type)


async def fetch_image(url: str, *, timeout: float = 30) -> ImageBlob:
    """下载远程图片，优先使用响应头的 content-type"""
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        resp = await client.get(url)
        resp.raise_for_status()
    ct = resp.headers.get("content-type", "").split(";")[0].strip()
    logger.info("下载图片: %s, content-type=%s, size=%d", url, ct, len(resp.content))
    return image_from_bytes(resp.content, ct if ct.startswith("image/") else None)

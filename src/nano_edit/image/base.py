"""图片编辑抽象接口"""

import base64
import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from PIL import Image

from .errors import EditStatus, ImageEditError, UnknownEditError


@dataclass(frozen=True)
class ImageBlob:
    """编码后的图片：base64 文本 + MIME 类型"""

    data: str
    mime_type: str = "image/png"

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str = "image/png") -> "ImageBlob":
        return cls(data=base64.b64encode(raw).decode("ascii"), mime_type=mime_type)

    def decode(self) -> bytes:
        return base64.b64decode(self.data)

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

    def image_format(self) -> str:
        """用 Pillow 校验图片结构，返回格式名（如 PNG）"""
        img = Image.open(io.BytesIO(self.decode()))
        img.verify()
        return img.format or ""

    def __repr__(self) -> str:
        return f"ImageBlob(mime_type={self.mime_type!r}, size={len(self.data)})"


@dataclass(frozen=True)
class EditRequest:
    """单次编辑请求"""

    image: ImageBlob
    instruction: str


@dataclass
class EditResult:
    """编辑结果，成功时带图片，失败时带错误"""

    status: EditStatus
    image: ImageBlob | None = None
    error: ImageEditError | None = None
    provider: str = ""
    metadata: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is EditStatus.SUCCEEDED

    @property
    def message(self) -> str:
        return str(self.error) if self.error else ""

    @classmethod
    def success(cls, image: ImageBlob, *, provider: str = "", **metadata) -> "EditResult":
        return cls(
            status=EditStatus.SUCCEEDED,
            image=image,
            provider=provider,
            metadata=metadata,
        )

    @classmethod
    def failure(cls, error: ImageEditError, *, provider: str = "") -> "EditResult":
        return cls(status=error.status, error=error, provider=provider)

    def unwrap(self) -> ImageBlob:
        """成功返回图片，失败重新抛出对应异常"""
        if self.error is not None:
            raise self.error
        if self.image is None:
            raise UnknownEditError()
        return self.image


class EditProvider(ABC):
    """图片编辑 Provider 抽象基类"""

    # 为 False 时客户端不校验凭证（离线 provider）
    requires_credential: bool = True

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider 名称"""

    @abstractmethod
    async def edit(
        self,
        request: EditRequest,
        *,
        credential: str | None,
    ) -> ImageBlob:
        """按指令编辑图片

        失败时抛出 ImageEditError 子类，不重试。
        """

    def close(self) -> None:
        """释放资源"""

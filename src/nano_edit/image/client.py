"""统一图片编辑客户端

解析凭证后路由到对应 provider，把所有失败收敛为 EditResult。
"""

import logging
from typing import Any

from ..config import EditConfig
from .base import EditProvider, EditRequest, EditResult, ImageBlob
from .errors import (
    EditStatus,
    ImageEditError,
    MissingCredentialError,
    UnknownEditError,
)

logger = logging.getLogger(__name__)

# 已注册的 provider 工厂
_PROVIDER_FACTORIES: dict[str, type] = {}


def _ensure_registered() -> None:
    """延迟注册，避免循环导入"""
    if _PROVIDER_FACTORIES:
        return
    from .providers.gemini import GeminiProvider
    from .providers.stub import StubEditProvider

    _PROVIDER_FACTORIES["gemini"] = GeminiProvider
    _PROVIDER_FACTORIES["stub"] = StubEditProvider


class ImageEditClient:
    """统一图片编辑客户端

    用法:
        client = ImageEditClient(EditConfig.from_env())
        result = await client.edit(image, "把背景换成蓝色")
        if result.ok:
            print(result.image.to_data_url())
    """

    def __init__(
        self,
        config: EditConfig | None = None,
        *,
        provider: str | EditProvider = "gemini",
        **provider_kwargs: Any,
    ):
        self.config = config or EditConfig()
        if isinstance(provider, EditProvider):
            self._provider = provider
        else:
            _ensure_registered()
            factory = _PROVIDER_FACTORIES.get(provider)
            if not factory:
                raise ValueError(
                    f"未知 provider: {provider}，可选: {list(_PROVIDER_FACTORIES.keys())}"
                )
            if provider == "gemini":
                provider_kwargs.setdefault("model", self.config.model)
                provider_kwargs.setdefault(
                    "request_image_modality", self.config.request_image_modality
                )
                provider_kwargs.setdefault("timeout", self.config.timeout)
            self._provider = factory(**provider_kwargs)

    @property
    def provider_name(self) -> str:
        return self._provider.name

    async def edit(
        self,
        image: ImageBlob,
        instruction: str,
        credential: str | None = None,
    ) -> EditResult:
        """按指令编辑图片，最多一次网络请求

        失败不抛异常，通过 EditResult.status 区分；需要异常时调用 unwrap()。
        """
        name = self._provider.name
        resolved = self.config.resolve_credential(credential)
        if self._provider.requires_credential and not resolved:
            logger.error("未配置 API key，跳过请求")
            return EditResult.failure(MissingCredentialError(), provider=name)

        logger.info(
            "图片编辑: provider=%s, mime_type=%s, size=%d, instruction_len=%d",
            name,
            image.mime_type,
            len(image.data),
            len(instruction),
        )
        request = EditRequest(image=image, instruction=instruction)
        try:
            edited = await self._provider.edit(request, credential=resolved)
        except ImageEditError as exc:
            return EditResult.failure(exc, provider=name)
        except Exception as exc:
            logger.exception("图片编辑出现未知错误")
            error = UnknownEditError()
            error.__cause__ = exc
            return EditResult.failure(error, provider=name)

        logger.info("图片编辑完成: provider=%s, mime_type=%s", name, edited.mime_type)
        return EditResult.success(edited, provider=name)

    def close(self) -> None:
        self._provider.close()


async def edit_image_with_prompt(
    base64_data: str,
    mime_type: str,
    prompt: str,
    api_key: str | None = None,
    *,
    client: ImageEditClient | None = None,
) -> str | None:
    """调用方入口：返回编辑后图片的 base64，模型未出图时返回 None

    其他失败抛出 ImageEditError 子类，消息可直接展示给用户。
    """
    if not prompt or not prompt.strip():
        raise ValueError("编辑指令不能为空")

    client = client or ImageEditClient(EditConfig.from_env())
    result = await client.edit(
        ImageBlob(data=base64_data, mime_type=mime_type),
        prompt,
        credential=api_key,
    )
    if result.status is EditStatus.NO_IMAGE_PRODUCED:
        return None
    return result.unwrap().data

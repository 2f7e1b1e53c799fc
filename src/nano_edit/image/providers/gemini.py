"""Google Gemini 图片编辑 (Gemini API)"""

import base64
import logging

from google import genai
from google.genai import errors, types

from ...config import DEFAULT_MODEL, DEFAULT_TIMEOUT
from ..base import EditProvider, EditRequest, ImageBlob
from ..errors import MissingCredentialError, NoImageProducedError, ServiceError

logger = logging.getLogger(__name__)


class GeminiProvider(EditProvider):
    """Google Gemini 图片编辑：一张图 + 一条指令，单次请求，不重试"""

    def __init__(
        self,
        *,
        model: str = DEFAULT_MODEL,
        request_image_modality: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.model = model
        self.request_image_modality = request_image_modality
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "gemini"

    def _make_client(self, credential: str) -> genai.Client:
        # HttpOptions.timeout 单位为毫秒；attempts=1 关闭 SDK 自带重试
        return genai.Client(
            api_key=credential,
            http_options=types.HttpOptions(
                timeout=int(self.timeout * 1000),
                retry_options=types.HttpRetryOptions(attempts=1),
            ),
        )

    def _build_config(self) -> types.GenerateContentConfig | None:
        if not self.request_image_modality:
            return None
        return types.GenerateContentConfig(response_modalities=["IMAGE"])

    async def edit(
        self,
        request: EditRequest,
        *,
        credential: str | None,
    ) -> ImageBlob:
        if not credential:
            raise MissingCredentialError()

        image = request.image
        contents = [
            types.Part.from_bytes(data=image.decode(), mime_type=image.mime_type),
            types.Part.from_text(text=request.instruction),
        ]
        config = self._build_config()
        logger.debug(
            "Gemini generate_content 参数: model=%s, mime_type=%s, modalities=%s, timeout=%s",
            self.model,
            image.mime_type,
            config.response_modalities if config else None,
            self.timeout,
        )

        client = self._make_client(credential)
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=contents,
                config=config,
            )
        except errors.APIError as exc:
            logger.error("Gemini API 调用失败: code=%s, %s", exc.code, exc.message)
            raise ServiceError(
                f"API Error: {exc.message or exc}", status_code=exc.code
            ) from exc
        except Exception as exc:
            # 传输层异常随 HTTP 后端不同（httpx / aiohttp），统一按服务失败处理
            logger.error("Gemini 请求失败: %s: %s", type(exc).__name__, exc)
            raise ServiceError(f"API Error: {exc}") from exc
        finally:
            await client.aio.aclose()

        return _extract_image(response)


def _extract_image(response: types.GenerateContentResponse) -> ImageBlob:
    """取第一个候选中第一个带 inline_data 的 part"""
    texts: list[str] = []
    candidates = response.candidates or []
    parts = (candidates[0].content.parts or []) if candidates and candidates[0].content else []
    for part in parts:
        if part.inline_data and part.inline_data.data:
            raw = part.inline_data.data
            b64 = (
                base64.b64encode(raw).decode("ascii")
                if isinstance(raw, bytes)
                else raw
            )
            return ImageBlob(
                data=b64,
                mime_type=part.inline_data.mime_type or "image/png",
            )
        if part.text:
            texts.append(part.text)

    text = "\n".join(texts)
    logger.warning("Gemini 未返回图片, text=%r", text[:200])
    raise NoImageProducedError(text=text)

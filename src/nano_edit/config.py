"""图片编辑配置

环境变量:
    GEMINI_API_KEY: Gemini API key（优先）
    API_KEY: 兼容旧部署的 API key
    GEMINI_IMAGE_MODEL: 模型名（默认 gemini-2.5-flash-image）
    GEMINI_TIMEOUT: 请求超时秒数（默认 120）
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash-image"
DEFAULT_TIMEOUT = 120.0

# 按顺序查找
_CREDENTIAL_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")


@dataclass
class EditConfig:
    """ImageEditClient 的配置，构造时传入"""

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    request_image_modality: bool = True
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "EditConfig":
        timeout = DEFAULT_TIMEOUT
        raw_timeout = os.environ.get("GEMINI_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                logger.warning("GEMINI_TIMEOUT 不是数字，使用默认值: %r", raw_timeout)
        return cls(
            api_key=_credential_from_env(),
            model=os.environ.get("GEMINI_IMAGE_MODEL", DEFAULT_MODEL),
            timeout=timeout,
        )

    def resolve_credential(self, explicit: str | None = None) -> str | None:
        """显式参数 → 配置对象 → 环境变量，空字符串视为未配置"""
        if explicit:
            return explicit
        if self.api_key:
            return self.api_key
        return _credential_from_env()


def _credential_from_env() -> str | None:
    for var in _CREDENTIAL_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return value
    return None

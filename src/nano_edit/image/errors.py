"""图片编辑结果状态与错误分类"""

import enum


class EditStatus(enum.Enum):
    """一次编辑调用的最终状态"""

    SUCCEEDED = "succeeded"
    MISSING_CREDENTIAL = "missing_credential"
    SERVICE_ERROR = "service_error"
    NO_IMAGE_PRODUCED = "no_image_produced"
    UNKNOWN_ERROR = "unknown_error"


class ImageEditError(Exception):
    """图片编辑失败的基类"""

    status = EditStatus.UNKNOWN_ERROR


class MissingCredentialError(ImageEditError):
    """未配置 API key，不会发起网络请求"""

    status = EditStatus.MISSING_CREDENTIAL

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "未配置 Gemini API key：请传入 api_key 参数、设置 EditConfig.api_key，"
            "或设置环境变量 GEMINI_API_KEY"
        )


class ServiceError(ImageEditError):
    """远程服务调用失败（网络、鉴权、配额、请求格式）"""

    status = EditStatus.SERVICE_ERROR

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NoImageProducedError(ImageEditError):
    """调用成功但响应中没有图片"""

    status = EditStatus.NO_IMAGE_PRODUCED

    def __init__(self, message: str | None = None, *, text: str = ""):
        super().__init__(message or "模型未返回图片，请换一个指令重试")
        self.text = text


class UnknownEditError(ImageEditError):
    """无法归类的失败"""

    def __init__(self, message: str | None = None):
        super().__init__(message or "与图片服务通信时发生未知错误")


class InvalidImageError(ValueError):
    """输入不是可识别的图片"""

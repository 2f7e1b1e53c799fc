"""Stub 图片编辑 Provider — 开发/测试用

原样返回输入图片，不调用任何外部 API。
"""

import logging

from ..base import EditProvider, EditRequest, ImageBlob

logger = logging.getLogger(__name__)


class StubEditProvider(EditProvider):
    """桩实现，回显输入图片"""

    requires_credential = False

    @property
    def name(self) -> str:
        return "stub"

    async def edit(
        self,
        request: EditRequest,
        *,
        credential: str | None,
    ) -> ImageBlob:
        logger.debug(
            "Stub edit: mime_type=%s, instruction=%r",
            request.image.mime_type,
            request.instruction,
        )
        return request.image

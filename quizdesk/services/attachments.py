# quizdesk/services/attachments.py
"""과제 첨부파일 검증 (실제 업로드는 외부 스토리지)"""
import logging
import uuid
from typing import Optional

from fastapi import status

from quizdesk.core.constants import AttachmentTypes, ErrorCodes, ErrorMessages
from quizdesk.core.exceptions import AttachmentRejectedError
from quizdesk.core.settings import settings
from quizdesk.schemas.attachments import AttachmentInfo, AttachmentPlan

logger = logging.getLogger(__name__)


def file_extension(filename: str) -> str:
    # 점이 없으면 파일명 전체를 확장자로 취급
    return filename.rsplit(".", 1)[-1]


def plan_attachment(info: AttachmentInfo, max_bytes: Optional[int] = None) -> AttachmentPlan:
    """
    크기/형식 검증 후 저장 경로 생성

    Raises:
        AttachmentRejectedError: 크기 초과(413) 또는 허용되지 않은 형식(415)
    """
    limit = max_bytes or settings.MAX_UPLOAD_BYTES
    if info.size > limit:
        raise AttachmentRejectedError(
            message=ErrorMessages.FILE_TOO_LARGE,
            code=ErrorCodes.ATTACHMENT_TOO_LARGE,
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            filename=info.filename,
        )
    if info.content_type not in AttachmentTypes.ALLOWED:
        raise AttachmentRejectedError(
            message=ErrorMessages.FILE_TYPE_NOT_ALLOWED,
            code=ErrorCodes.ATTACHMENT_TYPE_NOT_ALLOWED,
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            filename=info.filename,
        )

    ext = file_extension(info.filename)
    plan = AttachmentPlan(
        bucket=AttachmentTypes.BUCKET,
        storage_path=f"{uuid.uuid4()}.{ext}",
        extension=ext,
    )
    logger.info("attachment_planned", extra={"content_type": info.content_type, "size": info.size})
    return plan

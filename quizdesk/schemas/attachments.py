# quizdesk/schemas/attachments.py
from pydantic import BaseModel, Field

from quizdesk.schemas.questions import CamelModel


class AttachmentInfo(BaseModel):
    filename: str = Field(min_length=1)
    content_type: str
    size: int = Field(ge=0)


class AttachmentPlan(CamelModel):
    """외부 스토리지 업로드에 사용할 저장 경로"""
    bucket: str
    storage_path: str
    extension: str

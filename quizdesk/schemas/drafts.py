# quizdesk/schemas/drafts.py
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from quizdesk.schemas.questions import CamelModel, ParsedQuestion, QuestionForm


def _one_blank_question() -> List[QuestionForm]:
    return [QuestionForm()]


class BulkInputState(CamelModel):
    """일괄 입력 미리보기 상태 (세션 로컬)"""
    draft_text: str = ""
    is_previewing: bool = False
    preview_visible: bool = True
    parsed_questions: List[ParsedQuestion] = Field(default_factory=list)
    error_message: Optional[str] = None


class AssignmentDraft(CamelModel):
    """생성 전 과제 초안 - 문항/선택지를 포함한 하나의 편집 단위"""
    instructor_id: Optional[str] = None
    title: str = ""
    description: str = ""
    due_date: Optional[datetime] = None
    attachment_url: Optional[str] = None
    questions: List[QuestionForm] = Field(default_factory=_one_blank_question, min_length=1)


class DraftSession(CamelModel):
    session_id: str
    created_at: datetime
    bulk: BulkInputState = Field(default_factory=BulkInputState)
    assignment: AssignmentDraft = Field(default_factory=AssignmentDraft)


# ── 요청 ──────────────────────────────────────────────────────
class DraftTextUpdate(BaseModel):
    text: str


class AssignmentFieldsUpdate(CamelModel):
    # None 인 필드는 변경하지 않음
    instructor_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    attachment_url: Optional[str] = None


class QuestionFieldUpdate(CamelModel):
    field: Literal["text", "correctAnswer", "correct_answer", "explanation"]
    value: Any


class OptionUpdate(BaseModel):
    value: str


# ── 응답 ──────────────────────────────────────────────────────
class ConfirmResponse(CamelModel):
    added: int
    session: DraftSession


class AssignmentInsertPayload(CamelModel):
    """외부 데이터 저장소로 넘길 과제/문항 행"""
    assignment: Dict[str, Any]
    questions: List[Dict[str, Any]]

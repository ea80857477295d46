# quizdesk/schemas/questions.py
from typing import List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from quizdesk.core.constants import QuestionDefaults


class CamelModel(BaseModel):
    # 프론트는 camelCase(correctAnswer), 내부는 snake_case - 둘 다 입력 허용
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _bulk_option_labels() -> List[str]:
    return list(QuestionDefaults.BULK_OPTION_LABELS)


def _blank_options() -> List[str]:
    return list(QuestionDefaults.BLANK_OPTIONS)


class ParsedQuestion(CamelModel):
    """일괄 입력 텍스트에서 파싱된 문항 (선택지는 번호 라벨 고정)"""
    text: str = Field(min_length=1)
    options: List[str] = Field(default_factory=_bulk_option_labels, min_length=5, max_length=5)
    correct_answer: int = Field(ge=0, le=4)
    explanation: str = ""


class QuestionForm(CamelModel):
    """과제 초안 안에서 편집 중인 문항"""
    text: str = ""
    options: List[str] = Field(default_factory=_blank_options, min_length=5, max_length=5)
    correct_answer: int = Field(default=0, ge=0, le=4)
    explanation: str = ""

    def is_blank(self) -> bool:
        return (
            not self.text.strip()
            and all(not opt.strip() for opt in self.options)
            and not self.explanation.strip()
        )


# ── 요청/응답 ──────────────────────────────────────────────────
class BulkParseRequest(BaseModel):
    text: str


class BulkParseResponse(CamelModel):
    questions: List[ParsedQuestion]
    count: int

# quizdesk/services/assignment_draft.py
"""
과제 초안 편집/검증
초안(AssignmentDraft)은 참조로 받아 직접 변경
"""
import logging
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError as PydanticValidationError

from quizdesk.core.constants import ErrorMessages, QuestionDefaults
from quizdesk.core.exceptions import AssignmentValidationError, ValidationError
from quizdesk.schemas.drafts import AssignmentDraft, AssignmentFieldsUpdate, AssignmentInsertPayload
from quizdesk.schemas.questions import ParsedQuestion, QuestionForm

logger = logging.getLogger(__name__)

_FIELD_ALIASES = {
    "text": "text",
    "correctAnswer": "correct_answer",
    "correct_answer": "correct_answer",
    "explanation": "explanation",
}


def _check_question_index(draft: AssignmentDraft, index: int) -> None:
    if index < 0 or index >= len(draft.questions):
        raise ValidationError(
            message=f"문제 번호가 올바르지 않습니다: {index + 1}",
            details={"question_index": index, "question_count": len(draft.questions)},
        )


def add_question(draft: AssignmentDraft) -> QuestionForm:
    question = QuestionForm()
    draft.questions.append(question)
    return question


def remove_question(draft: AssignmentDraft, index: int) -> bool:
    """문항 삭제. 마지막 한 문항은 지우지 않음"""
    _check_question_index(draft, index)
    if len(draft.questions) <= 1:
        return False
    del draft.questions[index]
    return True


def update_question(draft: AssignmentDraft, index: int, field: str, value: Any) -> QuestionForm:
    _check_question_index(draft, index)
    attr = _FIELD_ALIASES.get(field)
    if attr is None:
        raise ValidationError(message=f"수정할 수 없는 필드입니다: {field}", details={"field": field})

    current = draft.questions[index]
    # 새 모델로 다시 검증 (correct_answer 0-4 범위 등)
    try:
        updated = QuestionForm.model_validate({**current.model_dump(), attr: value})
    except PydanticValidationError as e:
        raise ValidationError(
            details={"field": field, "errors": [err["msg"] for err in e.errors()]},
        ) from e
    draft.questions[index] = updated
    return updated


def update_option(draft: AssignmentDraft, question_index: int, option_index: int, value: str) -> QuestionForm:
    _check_question_index(draft, question_index)
    if option_index < 0 or option_index >= QuestionDefaults.OPTION_COUNT:
        raise ValidationError(
            message=f"선택지 번호가 올바르지 않습니다: {option_index + 1}",
            details={"option_index": option_index},
        )
    question = draft.questions[question_index]
    question.options[option_index] = value
    return question


def update_fields(draft: AssignmentDraft, update: AssignmentFieldsUpdate) -> AssignmentDraft:
    for name, value in update.model_dump(exclude_none=True).items():
        setattr(draft, name, value)
    return draft


def add_questions(draft: AssignmentDraft, parsed: Sequence[ParsedQuestion]) -> int:
    """
    일괄 입력 확정 문항을 초안에 병합

    초안에 손대지 않은 빈 문항 하나만 있으면 그 자리를 대체한다.
    """
    if len(draft.questions) == 1 and draft.questions[0].is_blank():
        draft.questions.clear()

    for q in parsed:
        draft.questions.append(QuestionForm(
            text=q.text,
            options=list(q.options),
            correct_answer=q.correct_answer,
            explanation=q.explanation,
        ))
    logger.info("draft_questions_added", extra={"added": len(parsed), "total": len(draft.questions)})
    return len(parsed)


def validate(draft: AssignmentDraft) -> None:
    """
    과제 생성 전 검증 (첫 번째 오류에서 중단)

    Raises:
        AssignmentValidationError
    """
    if not draft.instructor_id:
        raise AssignmentValidationError(ErrorMessages.INSTRUCTOR_REQUIRED)
    if not draft.title.strip():
        raise AssignmentValidationError(ErrorMessages.TITLE_REQUIRED)

    for i, question in enumerate(draft.questions, start=1):
        if not question.text.strip():
            raise AssignmentValidationError(
                ErrorMessages.QUESTION_TEXT_REQUIRED.format(question=i),
                question=i,
            )
        for j, option in enumerate(question.options, start=1):
            if not option.strip():
                raise AssignmentValidationError(
                    ErrorMessages.OPTION_TEXT_REQUIRED.format(question=i, option=j),
                    question=i,
                    option=j,
                )


def to_insert_payload(draft: AssignmentDraft) -> AssignmentInsertPayload:
    """검증 후 외부 저장소용 행(row) 생성"""
    validate(draft)

    assignment: Dict[str, Any] = {
        "title": draft.title,
        "description": draft.description or None,
        "instructor_id": draft.instructor_id,
        "due_date": draft.due_date.isoformat() if draft.due_date else None,
        "file_url": draft.attachment_url,
    }
    questions: List[Dict[str, Any]] = [
        {
            "text": q.text,
            "options": list(q.options),
            "correct_answer": q.correct_answer,
            "explanation": q.explanation or None,
            "order_number": index,
        }
        for index, q in enumerate(draft.questions)
    ]
    return AssignmentInsertPayload(assignment=assignment, questions=questions)


def reset(draft: AssignmentDraft) -> AssignmentDraft:
    draft.instructor_id = None
    draft.title = ""
    draft.description = ""
    draft.due_date = None
    draft.attachment_url = None
    draft.questions = [QuestionForm()]
    return draft

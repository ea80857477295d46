# quizdesk/routes/questions.py
import logging

from fastapi import APIRouter, Request

from quizdesk.core.exceptions import EmptyResultError
from quizdesk.schemas.error import ErrorResponse
from quizdesk.schemas.questions import BulkParseRequest, BulkParseResponse
from quizdesk.services.bulk_parser import parse_questions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.post(
    "/bulk/parse",
    response_model=BulkParseResponse,
    responses={422: {"model": ErrorResponse}},
)
def parse_bulk(payload: BulkParseRequest, request: Request):
    """
    일괄 입력 텍스트 파싱 (상태 저장 없음)

    - 정답 번호 오류 → 422 INVALID_ANSWER_NUMBER
    - 문항 0개 → 422 EMPTY_RESULT
    """
    questions = parse_questions(payload.text).unwrap()
    if not questions:
        raise EmptyResultError()

    logger.info(
        "bulk_parse",
        extra={"trace_id": getattr(request.state, "trace_id", None), "count": len(questions)},
    )
    return BulkParseResponse(questions=questions, count=len(questions))

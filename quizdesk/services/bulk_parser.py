# quizdesk/services/bulk_parser.py
"""
일괄 문항 입력 파서

입력 형식 (문항 사이는 빈 줄):

    What is the capital of France?
    3

    What is 2+2?
    2

첫 줄은 문항 본문, 둘째 줄은 정답 번호(1-5). 셋째 줄 이후는 무시.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional

from pydantic import BaseModel, Field

from quizdesk.core.constants import QuestionDefaults
from quizdesk.core.exceptions import InvalidAnswerNumberError
from quizdesk.schemas.questions import ParsedQuestion

logger = logging.getLogger(__name__)

# 빈 줄(공백만 있는 줄 포함)로 블록 분리
_BLOCK_SPLIT_RE = re.compile(r"\n\s*\n")
# 앞부분 정수만 읽음: "3", "+3", "3)", "3. Paris" 모두 3
_LEADING_INT_RE = re.compile(r"[+-]?[0-9]+")


class ParseResult(BaseModel):
    """파싱 결과: 성공(questions) 또는 실패(error)"""
    questions: List[ParsedQuestion] = Field(default_factory=list)
    error: Optional[str] = None
    answer_line: Optional[str] = None
    question_text: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_empty(self) -> bool:
        return self.ok and not self.questions

    def unwrap(self) -> List[ParsedQuestion]:
        """실패면 InvalidAnswerNumberError 발생, 성공이면 문항 목록 반환"""
        if not self.ok:
            raise InvalidAnswerNumberError(self.answer_line, self.question_text)
        return self.questions


def parse_answer_number(line: str) -> Optional[int]:
    """
    정답 줄을 0-based 인덱스로 변환

    Returns:
        0~4 인덱스, 정수가 아니거나 범위를 벗어나면 None
    """
    match = _LEADING_INT_RE.match(line.strip())
    if not match:
        return None
    index = int(match.group(0)) - 1
    if index < 0 or index >= QuestionDefaults.OPTION_COUNT:
        return None
    return index


def split_blocks(text: str) -> List[List[str]]:
    """텍스트를 블록 단위로 나누고 각 블록의 비어있지 않은 줄 목록 반환"""
    blocks = []
    for block in _BLOCK_SPLIT_RE.split(text.strip()):
        lines = [line for line in block.strip().split("\n") if line.strip()]
        blocks.append(lines)
    return blocks


def parse_questions(text: str) -> ParseResult:
    """
    일괄 입력 텍스트를 문항 목록으로 변환

    - 줄이 2개 미만인 블록은 조용히 건너뜀
    - 정답 번호가 잘못된 블록이 하나라도 있으면 전체 실패 (부분 결과 없음)

    Args:
        text: 붙여넣은 원문 전체

    Returns:
        ParseResult
    """
    questions: List[ParsedQuestion] = []
    skipped = 0

    for lines in split_blocks(text):
        if len(lines) < 2:
            skipped += 1
            continue

        question_text = lines[0].strip()
        answer_line = lines[1].strip()
        correct_answer = parse_answer_number(answer_line)

        if correct_answer is None:
            logger.info(
                "bulk_parse_invalid_answer",
                extra={"answer": answer_line, "parsed_before_error": len(questions)},
            )
            return ParseResult(
                error=InvalidAnswerNumberError(answer_line, question_text).message,
                answer_line=answer_line,
                question_text=question_text,
            )

        questions.append(ParsedQuestion(
            text=question_text,
            options=list(QuestionDefaults.BULK_OPTION_LABELS),
            correct_answer=correct_answer,
            explanation="",
        ))

    logger.debug("bulk_parse_done", extra={"count": len(questions), "skipped_blocks": skipped})
    return ParseResult(questions=questions)

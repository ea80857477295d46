# quizdesk/services/bulk_input.py
"""
일괄 입력 미리보기/확정 흐름
붙여넣기 → 미리보기(파싱) → 확인 후 한 번에 sink 로 전달
"""
import logging
from typing import Callable, List, Optional

from quizdesk.core.constants import ErrorMessages
from quizdesk.schemas.drafts import BulkInputState
from quizdesk.schemas.questions import ParsedQuestion
from quizdesk.services.bulk_parser import parse_questions

logger = logging.getLogger(__name__)

QuestionSink = Callable[[List[ParsedQuestion]], None]


class BulkQuestionInput:
    """
    세션 하나에 묶인 일괄 입력 상태 관리

    상태(BulkInputState)는 참조로 받아 직접 변경하므로
    호출 측에서 그대로 직렬화/저장하면 된다.
    """

    def __init__(self, state: Optional[BulkInputState] = None):
        self.state = state if state is not None else BulkInputState()

    @property
    def has_staged(self) -> bool:
        return len(self.state.parsed_questions) > 0

    @property
    def can_preview(self) -> bool:
        return bool(self.state.draft_text.strip())

    @property
    def can_confirm(self) -> bool:
        return self.has_staged

    def edit(self, text: str) -> None:
        # 초안만 교체. 이미 미리보기한 목록은 다시 preview 할 때까지 유지
        self.state.draft_text = text

    def preview(self) -> bool:
        """
        현재 초안을 파싱해 미리보기 목록에 올림

        Returns:
            미리보기 진입 여부
        """
        if not self.can_preview:
            return False

        self.state.error_message = None
        result = parse_questions(self.state.draft_text)

        if not result.ok:
            self.state.error_message = result.error
            return False

        if result.is_empty:
            self.state.error_message = ErrorMessages.NO_QUESTIONS_FOUND
            return False

        self.state.parsed_questions = result.questions
        self.state.is_previewing = True
        self.state.preview_visible = True
        logger.info("bulk_preview", extra={"count": len(result.questions)})
        return True

    def toggle_visibility(self) -> bool:
        """미리보기 목록 표시/숨김 (재파싱 없음)"""
        if not self.has_staged:
            return False
        self.state.preview_visible = not self.state.preview_visible
        return self.state.preview_visible

    def confirm(self, sink: QuestionSink) -> bool:
        """
        미리보기 목록 전체를 sink 에 한 번에 넘기고 상태 초기화

        Returns:
            sink 호출 여부
        """
        if not self.can_confirm:
            return False

        staged = list(self.state.parsed_questions)
        sink(staged)
        logger.info("bulk_confirm", extra={"count": len(staged)})

        self.state.draft_text = ""
        self.state.parsed_questions = []
        self.state.is_previewing = False
        self.state.preview_visible = True
        return True

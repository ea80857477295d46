"""
일괄 입력 미리보기/확정 흐름 테스트
"""
from unittest.mock import Mock

from quizdesk.schemas.drafts import BulkInputState
from quizdesk.services.bulk_input import BulkQuestionInput


def _previewed(text: str) -> BulkQuestionInput:
    bulk = BulkQuestionInput()
    bulk.edit(text)
    bulk.preview()
    return bulk


class TestPreview:
    """미리보기"""

    def test_preview_success(self, sample_bulk_text):
        bulk = BulkQuestionInput()
        bulk.edit(sample_bulk_text)

        assert bulk.preview() is True
        assert bulk.state.is_previewing is True
        assert bulk.state.error_message is None
        assert [q.text for q in bulk.state.parsed_questions] == [
            "What is the capital of France?",
            "What is 2+2?",
        ]

    def test_preview_empty_result(self):
        """문항 0개 → 안내 메시지, 미리보기 진입 안 함"""
        bulk = _previewed("just one line\n\nand another")

        assert bulk.state.is_previewing is False
        assert bulk.state.parsed_questions == []
        assert bulk.state.error_message == "No questions found. Please check the format."

    def test_preview_invalid_answer_first_attempt(self):
        bulk = _previewed("A?\n1\n\nB?\n7\n\nC?\n2")

        assert bulk.state.is_previewing is False
        assert bulk.state.parsed_questions == []
        assert bulk.state.error_message == 'Invalid answer number "7" for question "B?". Must be 1-5.'

    def test_failed_preview_keeps_previous_staging(self, sample_bulk_text):
        """실패한 미리보기는 이전 목록을 건드리지 않음"""
        bulk = _previewed(sample_bulk_text)
        bulk.edit("Broken?\nzzz")

        assert bulk.preview() is False
        assert len(bulk.state.parsed_questions) == 2
        assert bulk.state.error_message.startswith('Invalid answer number "zzz"')

    def test_success_clears_previous_error(self, sample_bulk_text):
        bulk = _previewed("Broken?\n0")
        assert bulk.state.error_message is not None

        bulk.edit(sample_bulk_text)
        bulk.preview()

        assert bulk.state.error_message is None
        assert bulk.state.is_previewing is True

    def test_blank_draft_does_nothing(self):
        bulk = BulkQuestionInput()
        bulk.edit("   \n  ")

        assert bulk.can_preview is False
        assert bulk.preview() is False
        assert bulk.state.error_message is None

    def test_edit_does_not_invalidate_preview(self, sample_bulk_text):
        bulk = _previewed(sample_bulk_text)
        bulk.edit("something else entirely")

        assert bulk.state.is_previewing is True
        assert len(bulk.state.parsed_questions) == 2

    def test_state_shared_by_reference(self, sample_bulk_text):
        """외부에서 넘긴 상태 객체를 그대로 갱신"""
        state = BulkInputState(draft_text=sample_bulk_text)
        BulkQuestionInput(state).preview()

        assert state.is_previewing is True
        assert len(state.parsed_questions) == 2


class TestToggleVisibility:
    """미리보기 표시/숨김"""

    def test_toggle_without_staging_is_noop(self):
        bulk = BulkQuestionInput()

        assert bulk.toggle_visibility() is False
        assert bulk.state.preview_visible is True

    def test_toggle_does_not_reparse(self, sample_bulk_text):
        bulk = _previewed(sample_bulk_text)
        bulk.edit("Broken?\n0")

        assert bulk.toggle_visibility() is False
        assert bulk.toggle_visibility() is True
        assert bulk.state.error_message is None
        assert len(bulk.state.parsed_questions) == 2


class TestConfirm:
    """확정"""

    def test_confirm_passes_all_and_resets(self, sample_bulk_text):
        bulk = _previewed(sample_bulk_text)
        staged = list(bulk.state.parsed_questions)
        sink = Mock()

        assert bulk.confirm(sink) is True

        sink.assert_called_once_with(staged)
        assert bulk.state.draft_text == ""
        assert bulk.state.parsed_questions == []
        assert bulk.state.is_previewing is False

    def test_confirm_without_staging(self):
        sink = Mock()
        bulk = BulkQuestionInput()

        assert bulk.confirm(sink) is False
        sink.assert_not_called()

    def test_confirm_after_empty_result(self):
        sink = Mock()
        bulk = _previewed("lonely line")

        assert bulk.confirm(sink) is False
        sink.assert_not_called()

    def test_confirm_twice_calls_sink_once(self, sample_bulk_text):
        sink = Mock()
        bulk = _previewed(sample_bulk_text)

        bulk.confirm(sink)
        bulk.confirm(sink)

        assert sink.call_count == 1

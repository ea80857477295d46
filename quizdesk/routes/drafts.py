# quizdesk/routes/drafts.py
"""
과제 초안 세션 API
일괄 입력 미리보기/확정 + 문항 편집 + 생성 전 검증
"""
import time

from fastapi import APIRouter, Depends, Request, Response, status

from quizdesk.core.logging import logger, log_action
from quizdesk.schemas.drafts import (
    AssignmentFieldsUpdate,
    AssignmentInsertPayload,
    ConfirmResponse,
    DraftSession,
    DraftTextUpdate,
    OptionUpdate,
    QuestionFieldUpdate,
)
from quizdesk.services import assignment_draft
from quizdesk.services.bulk_input import BulkQuestionInput
from quizdesk.services.draft_store import DraftStore, get_draft_store

router = APIRouter(prefix="/api/drafts", tags=["drafts"])


def _req_id(request: Request):
    return getattr(request.state, "req_id", None)


@router.post("", response_model=DraftSession, status_code=status.HTTP_201_CREATED)
def create_draft(store: DraftStore = Depends(get_draft_store)):
    return store.create()


@router.get("/{session_id}", response_model=DraftSession)
def get_draft(session_id: str, store: DraftStore = Depends(get_draft_store)):
    return store.load(session_id)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_draft(session_id: str, store: DraftStore = Depends(get_draft_store)):
    store.delete(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{session_id}", response_model=DraftSession)
def update_draft(
    session_id: str,
    payload: AssignmentFieldsUpdate,
    store: DraftStore = Depends(get_draft_store),
):
    session = store.load(session_id)
    assignment_draft.update_fields(session.assignment, payload)
    return store.save(session)


# ===========================================
# 일괄 입력
# ===========================================

@router.put("/{session_id}/bulk/text", response_model=DraftSession)
def edit_bulk_text(
    session_id: str,
    payload: DraftTextUpdate,
    store: DraftStore = Depends(get_draft_store),
):
    session = store.load(session_id)
    BulkQuestionInput(session.bulk).edit(payload.text)
    return store.save(session)


@router.post("/{session_id}/bulk/preview", response_model=DraftSession)
def preview_bulk(
    session_id: str,
    request: Request,
    store: DraftStore = Depends(get_draft_store),
):
    """파싱 오류는 bulk.errorMessage 로 돌려줌 (HTTP 200)"""
    t0 = time.time()
    session = store.load(session_id)
    entered = BulkQuestionInput(session.bulk).preview()
    store.save(session)

    elapsed = int((time.time() - t0) * 1000)
    log_action(logger, _req_id(request), session_id, "bulk_preview", elapsed,
               "ok" if entered else "rejected", session.bulk.error_message)
    return session


@router.post("/{session_id}/bulk/toggle", response_model=DraftSession)
def toggle_bulk_preview(session_id: str, store: DraftStore = Depends(get_draft_store)):
    session = store.load(session_id)
    BulkQuestionInput(session.bulk).toggle_visibility()
    return store.save(session)


@router.post("/{session_id}/bulk/confirm", response_model=ConfirmResponse)
def confirm_bulk(
    session_id: str,
    request: Request,
    store: DraftStore = Depends(get_draft_store),
):
    """미리보기 문항을 과제 초안에 한 번에 추가 (미리보기 없으면 added=0)"""
    t0 = time.time()
    session = store.load(session_id)
    added = len(session.bulk.parsed_questions)

    def sink(questions):
        assignment_draft.add_questions(session.assignment, questions)

    if not BulkQuestionInput(session.bulk).confirm(sink):
        added = 0
    store.save(session)

    elapsed = int((time.time() - t0) * 1000)
    log_action(logger, _req_id(request), session_id, "bulk_confirm", elapsed, "ok")
    return ConfirmResponse(added=added, session=session)


# ===========================================
# 문항 편집
# ===========================================

@router.post("/{session_id}/questions", response_model=DraftSession)
def add_question(session_id: str, store: DraftStore = Depends(get_draft_store)):
    session = store.load(session_id)
    assignment_draft.add_question(session.assignment)
    return store.save(session)


@router.delete("/{session_id}/questions/{index}", response_model=DraftSession)
def remove_question(session_id: str, index: int, store: DraftStore = Depends(get_draft_store)):
    session = store.load(session_id)
    assignment_draft.remove_question(session.assignment, index)
    return store.save(session)


@router.patch("/{session_id}/questions/{index}", response_model=DraftSession)
def update_question(
    session_id: str,
    index: int,
    payload: QuestionFieldUpdate,
    store: DraftStore = Depends(get_draft_store),
):
    session = store.load(session_id)
    assignment_draft.update_question(session.assignment, index, payload.field, payload.value)
    return store.save(session)


@router.put("/{session_id}/questions/{index}/options/{option_index}", response_model=DraftSession)
def update_option(
    session_id: str,
    index: int,
    option_index: int,
    payload: OptionUpdate,
    store: DraftStore = Depends(get_draft_store),
):
    session = store.load(session_id)
    assignment_draft.update_option(session.assignment, index, option_index, payload.value)
    return store.save(session)


@router.post("/{session_id}/submit", response_model=AssignmentInsertPayload)
def submit_draft(
    session_id: str,
    request: Request,
    store: DraftStore = Depends(get_draft_store),
):
    """검증 통과 시 저장용 행을 반환하고 초안을 비움"""
    t0 = time.time()
    session = store.load(session_id)
    payload = assignment_draft.to_insert_payload(session.assignment)
    assignment_draft.reset(session.assignment)
    store.save(session)

    elapsed = int((time.time() - t0) * 1000)
    log_action(logger, _req_id(request), session_id, "submit", elapsed, "ok")
    return payload

"""
과제 초안 세션 라우트 테스트
/api/drafts 엔드포인트 테스트
"""
import pytest


@pytest.fixture
def session_id(client, override_cache) -> str:
    response = client.post("/api/drafts")
    assert response.status_code == 201
    return response.json()["sessionId"]


def _preview(client, session_id, text):
    client.put(f"/api/drafts/{session_id}/bulk/text", json={"text": text})
    return client.post(f"/api/drafts/{session_id}/bulk/preview")


class TestDraftLifecycle:
    """세션 생성/조회/삭제"""

    def test_create_and_get(self, client, session_id):
        response = client.get(f"/api/drafts/{session_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["bulk"]["isPreviewing"] is False
        assert len(data["assignment"]["questions"]) == 1

    def test_get_unknown(self, client, override_cache):
        response = client.get("/api/drafts/unknown")

        assert response.status_code == 404
        assert response.json()["code"] == "DRAFT_NOT_FOUND"

    def test_delete(self, client, session_id):
        assert client.delete(f"/api/drafts/{session_id}").status_code == 204
        assert client.get(f"/api/drafts/{session_id}").status_code == 404

    def test_redis_unavailable(self, app, client, unavailable_cache):
        from quizdesk.services.cache_service import get_cache_service

        app.dependency_overrides[get_cache_service] = lambda: unavailable_cache
        try:
            response = client.post("/api/drafts")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json()["code"] == "REDIS_ERROR"

    def test_redis_drops_after_create(self, client, session_id, fake_redis):
        import redis as redis_lib

        fake_redis.get.side_effect = redis_lib.ConnectionError("down")

        response = client.get(f"/api/drafts/{session_id}")

        assert response.status_code == 500
        assert response.json()["code"] == "REDIS_ERROR"


class TestBulkFlow:
    """일괄 입력 미리보기 → 확정"""

    def test_preview_success(self, client, session_id, sample_bulk_text):
        response = _preview(client, session_id, sample_bulk_text)

        assert response.status_code == 200
        bulk = response.json()["bulk"]
        assert bulk["isPreviewing"] is True
        assert bulk["errorMessage"] is None
        assert [q["correctAnswer"] for q in bulk["parsedQuestions"]] == [2, 1]

    def test_preview_error_is_state_not_http_error(self, client, session_id):
        response = _preview(client, session_id, "A?\n1\n\nB?\n0")

        assert response.status_code == 200
        bulk = response.json()["bulk"]
        assert bulk["isPreviewing"] is False
        assert bulk["parsedQuestions"] == []
        assert bulk["errorMessage"] == 'Invalid answer number "0" for question "B?". Must be 1-5.'

    def test_preview_empty(self, client, session_id):
        bulk = _preview(client, session_id, "nothing here").json()["bulk"]
        assert bulk["errorMessage"] == "No questions found. Please check the format."

    def test_toggle(self, client, session_id, sample_bulk_text):
        _preview(client, session_id, sample_bulk_text)

        response = client.post(f"/api/drafts/{session_id}/bulk/toggle")

        bulk = response.json()["bulk"]
        assert bulk["previewVisible"] is False
        assert len(bulk["parsedQuestions"]) == 2

    def test_confirm_merges_into_assignment(self, client, session_id, sample_bulk_text):
        _preview(client, session_id, sample_bulk_text)

        response = client.post(f"/api/drafts/{session_id}/bulk/confirm")

        assert response.status_code == 200
        data = response.json()
        assert data["added"] == 2
        session = data["session"]
        assert session["bulk"]["draftText"] == ""
        assert session["bulk"]["parsedQuestions"] == []
        assert session["bulk"]["isPreviewing"] is False
        assert [q["text"] for q in session["assignment"]["questions"]] == [
            "What is the capital of France?",
            "What is 2+2?",
        ]

    def test_confirm_without_preview(self, client, session_id):
        response = client.post(f"/api/drafts/{session_id}/bulk/confirm")

        assert response.json()["added"] == 0
        assert len(response.json()["session"]["assignment"]["questions"]) == 1


class TestQuestionEditing:
    """문항 편집 + 제출"""

    def test_add_update_remove(self, client, session_id):
        client.post(f"/api/drafts/{session_id}/questions")
        client.patch(
            f"/api/drafts/{session_id}/questions/1",
            json={"field": "correctAnswer", "value": 3},
        )
        response = client.put(
            f"/api/drafts/{session_id}/questions/1/options/0",
            json={"value": "first"},
        )

        second = response.json()["assignment"]["questions"][1]
        assert second["correctAnswer"] == 3
        assert second["options"][0] == "first"

        response = client.delete(f"/api/drafts/{session_id}/questions/0")
        assert len(response.json()["assignment"]["questions"]) == 1

    def test_update_invalid_answer(self, client, session_id):
        response = client.patch(
            f"/api/drafts/{session_id}/questions/0",
            json={"field": "correctAnswer", "value": 9},
        )
        assert response.status_code == 422

    def test_submit_validation_error(self, client, session_id):
        response = client.post(f"/api/drafts/{session_id}/submit")

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "ASSIGNMENT_INVALID"
        assert data["message"] == "강사를 선택해주세요"

    def test_submit_success_resets_draft(self, client, session_id):
        client.patch(f"/api/drafts/{session_id}", json={"instructorId": "inst-1", "title": "Quiz"})
        client.patch(
            f"/api/drafts/{session_id}/questions/0",
            json={"field": "text", "value": "Pick the vowel"},
        )
        for i, option in enumerate(["a", "b", "c", "d", "f"]):
            client.put(f"/api/drafts/{session_id}/questions/0/options/{i}", json={"value": option})

        response = client.post(f"/api/drafts/{session_id}/submit")

        assert response.status_code == 200
        data = response.json()
        assert data["assignment"]["title"] == "Quiz"
        assert data["questions"][0]["options"] == ["a", "b", "c", "d", "f"]
        assert data["questions"][0]["order_number"] == 0

        draft = client.get(f"/api/drafts/{session_id}").json()["assignment"]
        assert draft["title"] == ""
        assert draft["questions"][0]["text"] == ""

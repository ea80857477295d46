"""
테스트 공통 설정 및 Fixtures
pytest의 conftest.py는 모든 테스트에서 공유되는 fixture를 정의
"""
import os
import sys
import pytest
from typing import Any, Dict, Generator
from unittest.mock import Mock, patch

# 설정 모듈 import 전에 테스트 환경 지정
os.environ["ENV"] = "test"

# 프로젝트 루트를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient


# ===========================================
# 환경 설정
# ===========================================

@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """테스트 환경 설정"""
    os.environ["ENV"] = "test"
    os.environ["REDIS_HOST"] = "localhost"
    os.environ["REDIS_PORT"] = "6379"
    os.environ["REDIS_DB"] = "1"  # 테스트용 별도 DB
    yield


# ===========================================
# FastAPI 클라이언트
# ===========================================

@pytest.fixture(scope="module")
def app():
    """FastAPI 애플리케이션 인스턴스"""
    from quizdesk.main import app as fastapi_app
    return fastapi_app


@pytest.fixture(scope="module")
def client(app) -> Generator:
    """테스트 클라이언트"""
    with TestClient(app) as test_client:
        yield test_client


# ===========================================
# Redis 관련 Fixtures
# ===========================================

@pytest.fixture
def mock_redis():
    """Redis 클라이언트 모킹 (호출 검증용)"""
    with patch("redis.Redis") as mock:
        redis_instance = Mock()
        redis_instance.get.return_value = None
        redis_instance.setex.return_value = True
        redis_instance.delete.return_value = 1
        redis_instance.ping.return_value = True
        mock.return_value = redis_instance
        yield redis_instance


@pytest.fixture
def fake_redis(mock_redis):
    """dict 에 실제로 저장하는 Redis 모킹 (세션 흐름 테스트용)"""
    store: Dict[str, str] = {}

    def _setex(key, ttl, value):
        store[key] = value
        return True

    def _delete(*keys):
        return sum(1 for k in keys if store.pop(k, None) is not None)

    mock_redis.get.side_effect = lambda key: store.get(key)
    mock_redis.setex.side_effect = _setex
    mock_redis.delete.side_effect = _delete
    mock_redis.store = store
    return mock_redis


@pytest.fixture
def cache_service(fake_redis):
    """fake_redis 로 동작하는 CacheService"""
    from quizdesk.services.cache_service import CacheService

    with patch("quizdesk.services.cache_service.redis.Redis", return_value=fake_redis):
        yield CacheService()


@pytest.fixture
def unavailable_cache():
    """Redis 연결 실패 상태의 CacheService"""
    import redis as redis_lib
    from quizdesk.services.cache_service import CacheService

    with patch("quizdesk.services.cache_service.redis.Redis") as mock:
        mock.return_value.ping.side_effect = redis_lib.ConnectionError()
        yield CacheService()


@pytest.fixture
def override_cache(app, cache_service):
    """라우트에서 사용하는 캐시 의존성 교체"""
    from quizdesk.services.cache_service import get_cache_service

    app.dependency_overrides[get_cache_service] = lambda: cache_service
    yield cache_service
    app.dependency_overrides.clear()


# ===========================================
# 문항 관련 Fixtures
# ===========================================

@pytest.fixture
def sample_bulk_text() -> str:
    """샘플 일괄 입력"""
    return (
        "What is the capital of France?\n"
        "3\n"
        "\n"
        "What is 2+2?\n"
        "2\n"
    )


@pytest.fixture
def sample_submissions() -> list:
    """샘플 제출 목록 (a1: 3건 채점, 1건 대기 / a2: 1건)"""
    return [
        {"id": "s1", "assignmentId": "a1", "score": 9, "totalQuestions": 10},
        {"id": "s2", "assignmentId": "a1", "score": 7, "totalQuestions": 10},
        {"id": "s3", "assignmentId": "a1", "score": 2, "totalQuestions": 8},
        {"id": "s4", "assignmentId": "a1", "score": None, "totalQuestions": 10},
        {"id": "s5", "assignmentId": "a2", "score": 5, "totalQuestions": 5},
    ]


@pytest.fixture
def complete_draft() -> Dict[str, Any]:
    """검증을 통과하는 과제 초안"""
    return {
        "instructorId": "inst-1",
        "title": "Reading Quiz 1",
        "description": "",
        "questions": [
            {
                "text": "Which word is a noun?",
                "options": ["run", "apple", "blue", "quickly", "sing"],
                "correctAnswer": 1,
                "explanation": "",
            }
        ],
    }


# ===========================================
# 유틸리티 Fixtures
# ===========================================

@pytest.fixture
def capture_logs():
    """로그 캡처"""
    import logging

    class LogCapture(logging.Handler):
        def __init__(self):
            super().__init__()
            self.records = []

        def emit(self, record):
            self.records.append(record)

        def get_messages(self):
            return [r.getMessage() for r in self.records]

    handler = LogCapture()
    logger = logging.getLogger()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(previous_level)

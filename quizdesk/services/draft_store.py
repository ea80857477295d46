# quizdesk/services/draft_store.py
"""
과제 초안 세션 저장소
DraftSession 을 Redis(CacheService)에 JSON 으로 보관
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

import redis
from fastapi import Depends

from quizdesk.core.constants import RedisKeys
from quizdesk.core.exceptions import DraftSessionNotFoundError, RedisError
from quizdesk.core.settings import settings
from quizdesk.schemas.drafts import DraftSession
from quizdesk.services.cache_service import CacheService, get_cache_service

logger = logging.getLogger(__name__)


class DraftStore:

    def __init__(self, cache: CacheService, ttl: Optional[int] = None):
        self.cache = cache
        self.ttl = ttl or settings.DRAFT_SESSION_TTL

    def _ensure_available(self) -> None:
        if not self.cache.is_available:
            raise RedisError()

    def create(self) -> DraftSession:
        session = DraftSession(
            session_id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
        )
        self.save(session)
        logger.info("draft_created", extra={"session_id": session.session_id})
        return session

    def load(self, session_id: str) -> DraftSession:
        """
        Raises:
            RedisError: 저장소 사용 불가
            DraftSessionNotFoundError: 없거나 만료된 세션
        """
        self._ensure_available()
        try:
            data = self.cache.get(RedisKeys.draft_session(session_id))
        except redis.RedisError as e:
            raise RedisError(original_error=e)
        if data is None:
            raise DraftSessionNotFoundError(session_id)
        return DraftSession.model_validate(data)

    def save(self, session: DraftSession) -> DraftSession:
        self._ensure_available()
        ok = self.cache.set(
            RedisKeys.draft_session(session.session_id),
            session.model_dump(mode="json", by_alias=True),
            self.ttl,
        )
        if not ok:
            raise RedisError()
        return session

    def delete(self, session_id: str) -> None:
        self._ensure_available()
        try:
            deleted = self.cache.delete(RedisKeys.draft_session(session_id))
        except redis.RedisError as e:
            raise RedisError(original_error=e)
        if not deleted:
            raise DraftSessionNotFoundError(session_id)
        logger.info("draft_deleted", extra={"session_id": session_id})


def get_draft_store(cache: CacheService = Depends(get_cache_service)) -> DraftStore:
    """FastAPI 의존성"""
    return DraftStore(cache)

"""
캐시 서비스
Redis 기반 JSON 저장소 (과제 초안 세션 보관)
"""
import json
import logging
from typing import Any, Optional

import redis

from quizdesk.core.settings import settings

logger = logging.getLogger(__name__)


class CacheService:
    """
    Redis 기반 JSON 캐시
    시작 시 연결 실패하면 비활성화 (조회 None, 저장 False).
    이후 발생한 조회/삭제 오류는 redis.RedisError 그대로 전달
    """

    def __init__(
        self,
        redis_host: str = "localhost",
        redis_port: int = 6379,
        redis_db: int = 0,
        default_ttl: int = 3600,  # 1시간
        redis_url: Optional[str] = None
    ):
        self.default_ttl = default_ttl
        try:
            if redis_url:
                self.redis_client = redis.Redis.from_url(
                    redis_url,
                    decode_responses=True,
                    socket_connect_timeout=3
                )
            else:
                self.redis_client = redis.Redis(
                    host=redis_host,
                    port=redis_port,
                    db=redis_db,
                    decode_responses=True,
                    socket_connect_timeout=3
                )
            self.redis_client.ping()
            self._available = True
        except redis.ConnectionError as e:
            logger.warning(f"Redis 캐시 연결 실패 (캐싱 비활성화): {e}")
            self._available = False

    @property
    def is_available(self) -> bool:
        """캐시 서비스 사용 가능 여부"""
        return self._available

    def get(self, key: str) -> Optional[Any]:
        """
        캐시에서 데이터 조회

        Args:
            key: 캐시 키

        Returns:
            캐시된 데이터, 키가 없거나 JSON 이 손상되면 None

        Raises:
            redis.RedisError: 조회 중 Redis 오류
        """
        if not self._available:
            return None

        try:
            value = self.redis_client.get(key)
        except redis.RedisError as e:
            logger.warning(f"캐시 조회 실패: {e}")
            raise

        if value is None:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            logger.warning(f"캐시 데이터 손상: {key} ({e})")
            return None
    def set(
        self,
        key: str,
        value: Any,
        ttl: Optional[int] = None
    ) -> bool:
        """
        캐시에 데이터 저장

        Args:
            key: 캐시 키
            value: 저장할 데이터 (JSON 직렬화 가능해야 함)
            ttl: TTL (초), None이면 기본값 사용

        Returns:
            성공 여부
        """
        if not self._available:
            return False

        try:
            json_value = json.dumps(value, ensure_ascii=False)
            self.redis_client.setex(
                key,
                ttl or self.default_ttl,
                json_value
            )
            return True
        except (redis.RedisError, TypeError) as e:
            logger.warning(f"캐시 저장 실패: {e}")
            return False

    def delete(self, key: str) -> bool:
        """
        캐시 삭제

        Returns:
            키가 실제로 삭제되었는지 여부

        Raises:
            redis.RedisError: 삭제 중 Redis 오류
        """
        if not self._available:
            return False

        try:
            return bool(self.redis_client.delete(key))
        except redis.RedisError as e:
            logger.warning(f"캐시 삭제 실패: {e}")
            raise


# ===========================================
# 싱글톤 인스턴스
# ===========================================

_cache_service: Optional[CacheService] = None


def get_cache_service() -> CacheService:
    """CacheService 싱글톤 인스턴스 반환"""
    global _cache_service
    if _cache_service is None:
        _cache_service = CacheService(
            redis_host=settings.REDIS_HOST,
            redis_port=settings.REDIS_PORT,
            redis_db=settings.REDIS_DB,
            default_ttl=settings.DRAFT_SESSION_TTL,
            redis_url=settings.REDIS_URL
        )
    return _cache_service

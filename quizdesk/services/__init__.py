"""
서비스 레이어
일괄 입력 파싱, 과제 초안, 성적 통계 등 비즈니스 로직
"""
from quizdesk.services.bulk_parser import ParseResult, parse_questions
from quizdesk.services.bulk_input import BulkQuestionInput
from quizdesk.services.cache_service import CacheService, get_cache_service
from quizdesk.services.draft_store import DraftStore, get_draft_store

__all__ = [
    # Bulk input
    "ParseResult",
    "parse_questions",
    "BulkQuestionInput",

    # Storage
    "CacheService",
    "get_cache_service",
    "DraftStore",
    "get_draft_store",
]

"""
Core 모듈
설정, 상수, 예외 등 핵심 컴포넌트
"""
from quizdesk.core.settings import settings, get_settings
from quizdesk.core.constants import (
    RedisKeys,
    ErrorCodes,
    ErrorMessages,
    QuestionDefaults,
    Roles,
    GradeBuckets,
    AttachmentTypes,
    HTTPHeaders,
)
from quizdesk.core.exceptions import (
    AppException,
    ValidationError,
    InvalidAnswerNumberError,
    EmptyResultError,
    AssignmentValidationError,
    AttachmentRejectedError,
    NotFoundError,
    DraftSessionNotFoundError,
    RedisError,
)

__all__ = [
    # Settings
    "settings",
    "get_settings",

    # Constants
    "RedisKeys",
    "ErrorCodes",
    "ErrorMessages",
    "QuestionDefaults",
    "Roles",
    "GradeBuckets",
    "AttachmentTypes",
    "HTTPHeaders",

    # Exceptions
    "AppException",
    "ValidationError",
    "InvalidAnswerNumberError",
    "EmptyResultError",
    "AssignmentValidationError",
    "AttachmentRejectedError",
    "NotFoundError",
    "DraftSessionNotFoundError",
    "RedisError",
]

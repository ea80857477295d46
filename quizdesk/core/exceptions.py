"""
커스텀 예외 클래스 정의
일관된 에러 처리를 위한 예외 계층 구조
"""
from typing import Any, Dict, Optional
from fastapi import status

from quizdesk.core.constants import ErrorCodes, ErrorMessages


class AppException(Exception):
    """
    기본 애플리케이션 예외
    모든 커스텀 예외의 베이스 클래스
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """예외를 딕셔너리로 변환"""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# ===========================================
# 검증 관련 예외
# ===========================================

class ValidationError(AppException):
    """입력 검증 실패 예외"""

    def __init__(
        self,
        message: str = ErrorMessages.INVALID_INPUT,
        code: str = ErrorCodes.VALIDATION_FAILED,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details
        )


class InvalidAnswerNumberError(ValidationError):
    """일괄 입력 문항의 정답 번호가 1-5 범위를 벗어남"""

    def __init__(self, answer_line: str, question_text: str):
        self.answer_line = answer_line
        self.question_text = question_text
        super().__init__(
            message=ErrorMessages.INVALID_ANSWER_NUMBER.format(
                answer=answer_line, question=question_text
            ),
            code=ErrorCodes.INVALID_ANSWER_NUMBER,
            details={"answer": answer_line, "question": question_text}
        )


class EmptyResultError(ValidationError):
    """파싱 결과 문항이 하나도 없음"""

    def __init__(self, message: str = ErrorMessages.NO_QUESTIONS_FOUND):
        super().__init__(message=message, code=ErrorCodes.EMPTY_RESULT)


class AssignmentValidationError(ValidationError):
    """과제 생성 전 입력 검증 실패"""

    def __init__(
        self,
        message: str,
        question: Optional[int] = None,
        option: Optional[int] = None
    ):
        details = {}
        if question is not None:
            details["question"] = question
        if option is not None:
            details["option"] = option
        super().__init__(
            message=message,
            code=ErrorCodes.ASSIGNMENT_INVALID,
            details=details
        )


class AttachmentRejectedError(AppException):
    """첨부파일 크기/형식 거부"""

    def __init__(self, message: str, code: str, status_code: int, filename: Optional[str] = None):
        details = {}
        if filename:
            details["filename"] = filename
        super().__init__(
            code=code,
            message=message,
            status_code=status_code,
            details=details
        )


# ===========================================
# 리소스 관련 예외
# ===========================================

class NotFoundError(AppException):
    """리소스를 찾을 수 없음"""

    def __init__(
        self,
        resource: str,
        resource_id: Any,
        message: Optional[str] = None
    ):
        msg = message or f"{resource} {resource_id}을(를) 찾을 수 없습니다."
        super().__init__(
            code=f"{resource.upper()}_NOT_FOUND",
            message=msg,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resource, "id": str(resource_id)}
        )


class DraftSessionNotFoundError(NotFoundError):
    """과제 초안 세션을 찾을 수 없음 (만료 포함)"""

    def __init__(self, session_id: Any):
        super().__init__(
            resource="Draft",
            resource_id=session_id,
            message=ErrorMessages.DRAFT_NOT_FOUND
        )


# ===========================================
# 외부 서비스 관련 예외
# ===========================================

class RedisError(AppException):
    """Redis 오류"""

    def __init__(
        self,
        message: str = ErrorMessages.REDIS_ERROR,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if original_error:
            details["original_error"] = str(original_error)

        super().__init__(
            code=ErrorCodes.REDIS_ERROR,
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )

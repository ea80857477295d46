"""
상수 정의 모듈
매직 스트링을 상수로 관리하여 유지보수성 향상
"""


class RedisKeys:
    """Redis 키 패턴 상수"""
    DRAFT_SESSION = "draft:{session_id}"

    @classmethod
    def draft_session(cls, session_id: str) -> str:
        return cls.DRAFT_SESSION.format(session_id=session_id)


class ErrorCodes:
    """에러 코드"""
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_ANSWER_NUMBER = "INVALID_ANSWER_NUMBER"
    EMPTY_RESULT = "EMPTY_RESULT"
    ASSIGNMENT_INVALID = "ASSIGNMENT_INVALID"
    ATTACHMENT_TOO_LARGE = "ATTACHMENT_TOO_LARGE"
    ATTACHMENT_TYPE_NOT_ALLOWED = "ATTACHMENT_TYPE_NOT_ALLOWED"
    DRAFT_NOT_FOUND = "DRAFT_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    REDIS_ERROR = "REDIS_ERROR"


class ErrorMessages:
    """사용자 친화적 에러 메시지"""
    INVALID_INPUT = "입력값이 올바르지 않습니다."
    NO_QUESTIONS_FOUND = "No questions found. Please check the format."
    INVALID_ANSWER_NUMBER = 'Invalid answer number "{answer}" for question "{question}". Must be 1-5.'
    DRAFT_NOT_FOUND = "요청한 과제 초안을 찾을 수 없습니다."
    INSTRUCTOR_REQUIRED = "강사를 선택해주세요"
    TITLE_REQUIRED = "과제 제목을 입력해주세요"
    QUESTION_TEXT_REQUIRED = "문제 {question}의 내용을 입력해주세요"
    OPTION_TEXT_REQUIRED = "문제 {question}, 선택지 {option}을 입력해주세요"
    FILE_TOO_LARGE = "파일 크기가 10MB를 초과합니다"
    FILE_TYPE_NOT_ALLOWED = "잘못된 파일 형식입니다. 허용: PDF, Word, PowerPoint, 이미지"
    INTERNAL_ERROR = "서버 오류가 발생했습니다. 관리자에게 문의하세요."
    REDIS_ERROR = "세션 저장소 오류가 발생했습니다."


class QuestionDefaults:
    """문항 기본값"""
    OPTION_COUNT = 5
    # 일괄 입력 문항은 선택지 본문 없이 번호만 사용
    BULK_OPTION_LABELS = ("1", "2", "3", "4", "5")
    BLANK_OPTIONS = ("", "", "", "", "")


class Roles:
    """사용자 역할"""
    ADMIN = "admin"
    INSTRUCTOR = "instructor"
    STUDENT = "student"


class GradeBuckets:
    """성적 구간 (하한, 등급) - 높은 구간부터"""
    THRESHOLDS = [(90, "A"), (80, "B"), (70, "C"), (60, "D")]
    FAILING = "F"
    ALL = ["A", "B", "C", "D", "F"]


class AttachmentTypes:
    """과제 첨부파일 허용 MIME 타입"""
    ALLOWED = [
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.ms-powerpoint",
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "image/jpeg",
        "image/png",
        "image/gif",
    ]
    BUCKET = "assignment-files"


class HTTPHeaders:
    """HTTP 헤더 상수"""
    REQUEST_ID = "X-Request-Id"

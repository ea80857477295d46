"""
전역 에러 핸들러
모든 예외를 일관된 형식으로 처리
"""
import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from quizdesk.core.constants import ErrorMessages
from quizdesk.core.exceptions import AppException
from quizdesk.core.settings import settings

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    애플리케이션에 전역 예외 핸들러 등록

    Args:
        app: FastAPI 애플리케이션 인스턴스
    """

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException
    ) -> JSONResponse:
        """
        커스텀 AppException 처리
        파싱 오류 등 사용자에게 그대로 보여줄 메시지는 message 에 담김
        """
        trace_id = getattr(request.state, "trace_id", None)

        # 로깅 (4xx는 warning, 5xx는 error)
        log_level = logging.WARNING if exc.status_code < 500 else logging.ERROR
        logger.log(
            log_level,
            exc.code,
            extra={
                "trace_id": trace_id,
                "error_message": exc.message,
                "status_code": exc.status_code,
                "details": exc.details,
                "path": str(request.url.path),
                "method": request.method,
            }
        )

        content = {
            "code": exc.code,
            "message": exc.message,
        }

        if trace_id:
            content["trace_id"] = trace_id

        if exc.details and settings.DEBUG:
            content["details"] = exc.details

        return JSONResponse(
            status_code=exc.status_code,
            content=content
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """
        Pydantic 검증 오류 처리
        요청 데이터 검증 실패 시 필드별 메시지 반환
        """
        trace_id = getattr(request.state, "trace_id", None)

        errors = []
        for error in exc.errors():
            field = " -> ".join(str(loc) for loc in error["loc"])
            errors.append({
                "field": field,
                "message": error["msg"],
                "type": error["type"]
            })

        logger.warning(
            "validation_error",
            extra={
                "trace_id": trace_id,
                "path": str(request.url.path),
                "errors": errors,
            }
        )

        content = {
            "code": "VALIDATION_ERROR",
            "message": ErrorMessages.INVALID_INPUT,
            "errors": errors,
        }

        if trace_id:
            content["trace_id"] = trace_id

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=content
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException
    ) -> JSONResponse:
        trace_id = getattr(request.state, "trace_id", None)
        content = {"code": "HTTP_ERROR", "message": str(exc.detail)}
        if trace_id:
            content["trace_id"] = trace_id
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """
        예상치 못한 일반 예외 처리
        """
        trace_id = getattr(request.state, "trace_id", None)

        logger.error(
            "unhandled_exception",
            extra={
                "trace_id": trace_id,
                "error_type": type(exc).__name__,
                "error_message": str(exc),
                "path": str(request.url.path),
                "method": request.method,
            },
            exc_info=True
        )

        if settings.DEBUG:
            detail = f"{type(exc).__name__}: {str(exc)}"
            stack_trace = traceback.format_exc()
        else:
            detail = ErrorMessages.INTERNAL_ERROR
            stack_trace = None

        content = {
            "code": "INTERNAL_SERVER_ERROR",
            "message": detail,
        }

        if trace_id:
            content["trace_id"] = trace_id

        if stack_trace:
            content["stack_trace"] = stack_trace

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=content
        )

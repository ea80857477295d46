# quizdesk/middleware/request_context.py
import logging
import time
import uuid
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from quizdesk.core.constants import HTTPHeaders

access_logger = logging.getLogger("access")


def _get_req_id_from_headers(request: Request) -> Optional[str]:
    # Starlette 헤더 dict는 case-insensitive
    return request.headers.get(HTTPHeaders.REQUEST_ID)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    요청마다 trace_id 부여 + 접근 로그

    - 수신 X-Request-Id 가 있으면 그대로 사용
    - 응답 헤더에 X-Request-Id 노출
    """

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()

        trace_id = _get_req_id_from_headers(request) or str(uuid.uuid4())
        request.state.trace_id = trace_id
        request.state.req_id = trace_id

        response: Optional[Response] = None
        try:
            response = await call_next(request)
            return response
        finally:
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            request.state.elapsed_ms = elapsed_ms

            if response is not None:
                response.headers[HTTPHeaders.REQUEST_ID] = trace_id

                expose = response.headers.get("Access-Control-Expose-Headers")
                if expose:
                    items = {h.strip() for h in expose.split(",")}
                    items.add(HTTPHeaders.REQUEST_ID)
                    response.headers["Access-Control-Expose-Headers"] = ", ".join(sorted(items))
                else:
                    response.headers["Access-Control-Expose-Headers"] = HTTPHeaders.REQUEST_ID

            access_logger.info(
                "request_done",
                extra={
                    "trace_id": trace_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status": getattr(response, "status_code", None),
                    "latency_ms": elapsed_ms,
                },
            )

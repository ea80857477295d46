# quizdesk/core/logging.py
import logging
import json
import sys
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

logger = logging.getLogger("quizdesk")
logger.setLevel(logging.INFO)

# --- 민감정보 레드액션 (REDIS_URL 비밀번호) ---
REDACT_PATTERNS = [
    re.compile(r"(rediss?://[^:/@\s]*:)[^@\s/]+(@)", re.IGNORECASE),
]

def _redact(text: str) -> str:
    if not isinstance(text, str):
        return text
    out = text
    for pat in REDACT_PATTERNS:
        out = pat.sub(r"\1***REDACTED***\2", out)
    return out

SAFE_ATTR_BLOCKLIST = {
    "args","asctime","created","exc_info","exc_text","filename",
    "funcName","levelname","levelno","lineno","module","msecs",
    "message","msg","name","pathname","process","processName",
    "relativeCreated","stack_info","thread","threadName","taskName",
}

class JsonFormatter(logging.Formatter):
    """
    한 줄 JSON 로그:
    {"ts": "...Z", "level": "INFO", "logger": "quizdesk", "msg": "draft_action",
     "req_id": "...", "session_id": "...", "action": "bulk_preview", ...}
    """
    def format(self, record: logging.LogRecord) -> str:
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "ts": now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": _redact(record.getMessage()),
        }

        for k, v in record.__dict__.items():
            if k in SAFE_ATTR_BLOCKLIST:
                continue
            # trace_id -> req_id
            key = "req_id" if k == "trace_id" else k
            payload.setdefault(key, _redact(v))

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

def configure_logging(level: str = "INFO") -> None:
    """루트 + uvicorn 로거를 stdout JSON 출력으로 통일"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    for name in ("", "uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.addHandler(handler)
        lg.setLevel(level.upper())

def log_action(
    logger: logging.Logger,
    req_id: Optional[str],
    session_id: str,
    action: str,
    elapsed_ms: int,
    result: str,
    error: Optional[str] = None,
) -> None:
    """초안 세션 액션 1건 기록 (라우터에서 호출). 실패 결과는 WARNING"""
    level = logging.INFO if result == "ok" else logging.WARNING
    logger.log(
        level,
        "draft_action",
        extra={
            "trace_id": req_id,
            "session_id": session_id,
            "action": action,
            "result": result,
            "elapsed_ms": elapsed_ms,
            "error": error,
        },
    )

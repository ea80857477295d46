# quizdesk/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quizdesk.core.settings import settings, print_settings_summary
from quizdesk.core.logging import configure_logging
from quizdesk.middleware.request_context import RequestContextMiddleware
from quizdesk.middleware.error_handler import setup_exception_handlers

from quizdesk.routes.questions import router as questions_router
from quizdesk.routes.drafts import router as drafts_router
from quizdesk.routes.analytics import router as analytics_router
from quizdesk.routes.admin import router as admin_router

# ---------- 앱 초기화 ----------
configure_logging(settings.LOG_LEVEL)
if settings.is_development:
    print_settings_summary()

app = FastAPI(title=settings.SERVICE_NAME, version="1.0.0")

# ---------- 미들웨어 ----------
app.add_middleware(RequestContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-Id"],
    max_age=600,
)

# ---------- 예외 핸들러 ----------
setup_exception_handlers(app)

# ---------- 라우터 등록 ----------
app.include_router(questions_router)
app.include_router(drafts_router)
app.include_router(analytics_router)
app.include_router(admin_router)

# ---------- 헬스 체크 ----------
@app.get("/api/health")
def health_check():
    return {"message": "OK"}

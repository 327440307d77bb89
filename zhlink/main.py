# zhlink/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from zhlink import __version__
from zhlink.core.constants import HTTPHeaders
from zhlink.core.logging import configure_logging, get_logger
from zhlink.core.settings import settings, validate_required_settings
from zhlink.middleware.error_handler import setup_exception_handlers
from zhlink.middleware.request_context import RequestContextMiddleware
from zhlink.routes.catalog import router as catalog_router
from zhlink.routes.challenges import router as challenges_router

# ---------- 앱 초기화 ----------
configure_logging(settings.LOG_LEVEL)
log = get_logger("zhlink.main")

problems = validate_required_settings()
if problems:
    log.warning("settings_problems", extra={"settings": problems, "env": settings.ENV})

app = FastAPI(
    title=settings.SERVICE_NAME,
    version=__version__,
    description="중국어 두 단계 연결 문항 생성/채점 API",
)

# ---------- 미들웨어 ----------
app.add_middleware(RequestContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[HTTPHeaders.REQUEST_ID],
    max_age=600,
)

# ---------- 예외 핸들러 ----------
setup_exception_handlers(app)

# ---------- 라우터 등록 ----------
app.include_router(challenges_router, prefix="/api")
app.include_router(catalog_router, prefix="/api")


# ---------- 헬스 체크 ----------
@app.get("/api/health")
def health_check():
    return {"message": "OK"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "zhlink.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )

"""
전역 에러 핸들러
모든 예외를 {"code", "message", "trace_id"} 형식으로 응답
"""
import logging
import traceback
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from zhlink.core.constants import ErrorCodes, ErrorMessages, HTTPHeaders
from zhlink.core.exceptions import AppException
from zhlink.core.settings import settings

logger = logging.getLogger("zhlink.error_handler")


def _field_errors(errors) -> List[Dict[str, str]]:
    return [
        {
            "field": " -> ".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]


def _error_body(code: str, message: str, trace_id: Optional[str], **extra: Any) -> Dict[str, Any]:
    """공통 에러 본문. 값이 비어 있는 extra 키는 생략"""
    body: Dict[str, Any] = {"code": code, "message": message}
    if trace_id:
        body["trace_id"] = trace_id
    body.update({k: v for k, v in extra.items() if v})
    return body


def _request_fields(request: Request) -> Dict[str, Any]:
    return {
        "trace_id": getattr(request.state, "trace_id", None),
        "path": request.url.path,
        "method": request.method,
    }


async def handle_app_exception(request: Request, exc: AppException) -> JSONResponse:
    """
    도메인 예외 처리
    SamplingExhausted(503) / SchemaViolation(422) / ItemGeneration(502) 등
    """
    ctx = _request_fields(request)
    level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    logger.log(level, exc.code, extra={
        **ctx,
        "error_message": exc.message,
        "status_code": exc.status_code,
        "details": exc.details,
    })

    body = _error_body(
        exc.code, exc.message, ctx["trace_id"],
        details=exc.details if settings.DEBUG else None,
    )
    return JSONResponse(status_code=exc.status_code, content=body)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 본문/쿼리 검증 실패"""
    ctx = _request_fields(request)
    errors = _field_errors(exc.errors())
    logger.warning("validation_error", extra={**ctx, "errors": errors})

    body = _error_body(ErrorCodes.REQUEST_VALIDATION, ErrorMessages.INVALID_INPUT,
                       ctx["trace_id"], errors=errors)
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=body)


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    """처리되지 않은 예외. 스택트레이스는 DEBUG 일 때만 응답에 포함"""
    ctx = _request_fields(request)
    logger.error("unhandled_exception", extra={
        **ctx,
        "error_type": type(exc).__name__,
        "error_message": str(exc),
    }, exc_info=exc)

    if settings.DEBUG:
        body = _error_body(ErrorCodes.INTERNAL_ERROR, f"{type(exc).__name__}: {exc}", ctx["trace_id"],
                           stack_trace="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    else:
        body = _error_body(ErrorCodes.INTERNAL_ERROR, ErrorMessages.INTERNAL_ERROR, ctx["trace_id"])

    # 가장 바깥 미들웨어에서 호출되므로 헤더를 직접 붙인다
    headers = {HTTPHeaders.REQUEST_ID: ctx["trace_id"]} if ctx["trace_id"] else None
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body, headers=headers)


def setup_exception_handlers(app: FastAPI) -> None:
    """애플리케이션에 전역 예외 핸들러 등록"""
    app.add_exception_handler(AppException, handle_app_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)

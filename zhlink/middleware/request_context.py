# zhlink/middleware/request_context.py
import logging
import time
import uuid
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from zhlink.core.constants import HTTPHeaders

access_logger = logging.getLogger("zhlink.access")

# 수신은 대소문자 무관, 송신은 X-Request-Id 로 통일
HDR_OUT = HTTPHeaders.REQUEST_ID


def _get_req_id_from_headers(request: Request) -> Optional[str]:
    # Starlette 헤더는 case-insensitive
    return request.headers.get(HDR_OUT)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """trace_id 부여/전파 + 요청 단위 access 로그"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()

        trace_id = _get_req_id_from_headers(request) or str(uuid.uuid4())
        request.state.trace_id = trace_id

        response: Optional[Response] = None
        try:
            response = await call_next(request)
            return response
        finally:
            elapsed_ms = int((time.perf_counter() - start) * 1000)

            if response is not None:
                response.headers[HDR_OUT] = trace_id

                # 브라우저에서 읽을 수 있도록 노출 (기존 값과 병합)
                expose = response.headers.get("Access-Control-Expose-Headers")
                if expose:
                    items = {h.strip() for h in expose.split(",")}
                    items.add(HDR_OUT)
                    response.headers["Access-Control-Expose-Headers"] = ", ".join(sorted(items))
                else:
                    response.headers["Access-Control-Expose-Headers"] = HDR_OUT

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

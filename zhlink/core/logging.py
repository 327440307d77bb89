# zhlink/core/logging.py
import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any, Dict

logger = logging.getLogger("zhlink")

# --- 민감정보 레드액션 ---
REDACT_PATTERNS = [
    re.compile(r"(Authorization:\s*)(Basic|Bearer)\s+[A-Za-z0-9\-\._~\+\/]+=*", re.IGNORECASE),
    re.compile(r"(api[_-]?key[\"']?\s*[:=]\s*[\"']?)[A-Za-z0-9\-_]{8,}", re.IGNORECASE),
]

# LogRecord 기본 속성 (extra 로 보지 않음)
_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "taskName"}


def _redact(value: Any) -> Any:
    """문자열/컨테이너 안의 토큰·키 값을 가린다."""
    if isinstance(value, str):
        for pat in REDACT_PATTERNS:
            value = pat.sub(r"\1***REDACTED***", value)
        return value
    if isinstance(value, dict):
        return {k: _redact(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_redact(v) for v in value]
    return value


class JsonFormatter(logging.Formatter):
    """
    한 줄 JSON 로그:
    {"ts": "2025-10-24T01:23:45.678Z", "level": "INFO", "logger": "zhlink.sampler",
     "msg": "spec_sampled", "req_id": "...", "chain_id": "...", "attempts": 3}

    extra 로 넘긴 값은 최상위 키로 펼친다. trace_id 는 req_id 로 기록.
    """

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": _redact(record.getMessage()),
        }

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key.startswith("_"):
                continue
            payload["req_id" if key == "trace_id" else key] = _redact(value)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO") -> None:
    """
    - 루트 로거에 stdout JSON 핸들러 하나만 둔다
    - uvicorn 로거도 같은 핸들러로 통일 (루트로 전파하지 않음)
    """
    level = level.upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    logger.setLevel(level)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.addHandler(handler)
        lg.propagate = False
        lg.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

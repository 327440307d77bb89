# zhlink/services/llm_client.py
"""
모델 응답 정리기
- 설명 문장/코드펜스/트레일링 콤마가 섞인 응답에서 JSON 객체만 추출
- 키 이름이 흔들리는 응답을 GeneratedItem 필드명으로 맞춘다
네트워크 호출은 하지 않는다 (클라이언트는 호출 측이 주입).
"""
from __future__ import annotations

import ast
import json
import re
from typing import Any, Dict

# ``` 또는 ```json 펜스 제거
_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.I | re.M)

# 작은따옴표/프라임 기호만 ' 로 정규화 (큰따옴표 계열은 중국어 본문에 쓰이므로 유지)
_SMART_QUOTES = {
    "‘": "'", "’": "'", "′": "'",
}
# 트레일링 콤마 제거( }, ] 직전 )
_RE_TRAILING_COMMA = re.compile(r",\s*([}\]])")

# 개행(\n), 캐리지리턴(\r), 탭(\t) 포함 모든 제어문자
CONTROL_CHARS_RE = re.compile(r"[\x00-\x1F]")

# 필드명 별칭 (앞쪽이 우선)
FIELD_ALIASES: Dict[str, tuple[str, ...]] = {
    "seed_zh": ("seed_zh", "seed", "seed_sentence"),
    "challenge_zh": ("challenge_zh", "challenge", "challenge_text", "instruction_zh"),
    "reference_answer_zh": ("reference_answer_zh", "reference_answer", "reference", "answer_zh", "answer"),
    "meta": ("meta", "metadata"),
}


def _strip_code_fences(txt: str) -> str:
    return _FENCE_RE.sub("", txt or "").strip()


def _normalize_quotes(s: str) -> str:
    for k, v in _SMART_QUOTES.items():
        s = s.replace(k, v)
    return s


def strip_control_chars(s: str) -> str:
    return CONTROL_CHARS_RE.sub(" ", s or "")


def strip_controls_deep(obj):
    """dict/list 내 모든 str 필드에서 제어문자 제거"""
    if isinstance(obj, dict):
        return {k: strip_controls_deep(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [strip_controls_deep(v) for v in obj]
    if isinstance(obj, str):
        return strip_control_chars(obj)
    return obj


def _extract_outer_json_block(s: str) -> str:
    """
    - 문자열이 곧바로 JSON이면 그대로 반환
    - 아니면 첫 '{'부터 마지막 '}'까지를 잘라낸다.
    - 둘 다 없으면 ValueError
    """
    s = s.strip()
    try:
        json.loads(s)
        return s
    except ValueError:
        pass

    start = s.find("{")
    end = s.rfind("}")
    if start == -1 or end == -1 or end <= start:
        raise ValueError("No JSON object found in model response.")
    return s[start : end + 1]


def _preclean_jsonish(raw: str) -> str:
    """
    파싱 전 정리:
      1) 코드펜스 제거
      2) 스마트 작은따옴표 정규화
      3) 트레일링 콤마 제거
      4) 가장 바깥 { ... } 블록 추출
    """
    s = _strip_code_fences(raw)
    s = _normalize_quotes(s)
    s = _RE_TRAILING_COMMA.sub(r"\1", s)
    return _extract_outer_json_block(s)


def extract_json(txt: str) -> Dict[str, Any]:
    """
    모델 원문에서 JSON 객체를 추출해 dict로 반환
    json.loads 실패 시 Python literal 스타일(ast.literal_eval)로 한 번 더 시도한다.
    """
    s = _preclean_jsonish(CONTROL_CHARS_RE.sub(" ", txt or ""))

    try:
        obj = json.loads(s)
    except ValueError as json_err:
        try:
            obj = ast.literal_eval(s)
        except (ValueError, SyntaxError):
            raise json_err
    if not isinstance(obj, dict):
        raise ValueError(f"Model response JSON is {type(obj).__name__}, expected object.")
    return strip_controls_deep(obj)


def coerce_generated_item(d: Dict[str, Any]) -> Dict[str, Any]:
    """
    키 별칭을 GeneratedItem 필드명으로 맞춘다.
    - 문자열 필드는 str()로 통일 (없으면 빈 문자열)
    - meta 가 dict 가 아니면 버린다
    """
    x = dict(d or {})
    out: Dict[str, Any] = {}
    for field, aliases in FIELD_ALIASES.items():
        for k in aliases:
            if x.get(k) not in (None, ""):
                out[field] = x[k]
                break

    for field in ("seed_zh", "challenge_zh", "reference_answer_zh"):
        out[field] = str(out.get(field) or "").strip()
    if not isinstance(out.get("meta"), dict):
        out["meta"] = {}
    return out

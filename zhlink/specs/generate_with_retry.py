# zhlink/specs/generate_with_retry.py

from __future__ import annotations

import logging
from typing import List

from zhlink.core.exceptions import ItemGenerationError
from zhlink.models.spec import GeneratedItem, Spec
from zhlink.prompts.prompt_manager import PromptManager
from zhlink.services.llm_client import coerce_generated_item, extract_json
from zhlink.specs.base import CompletionClient
from zhlink.specs.validators import check_generated_item

log = logging.getLogger("zhlink.item_generator")

TEMPERATURE_STEP = 0.1
MAX_TEMPERATURE = 1.0
MAX_ERROR_DETAIL = 2000


def _temperature_for_attempt(try_idx: int, base_temp: float) -> float:
    """재시도마다 temperature 를 조금씩 올린다 (상한 1.0, 기본값이 더 크면 기본값 유지)"""
    if try_idx == 0:
        return base_temp
    return max(base_temp, min(base_temp + TEMPERATURE_STEP * try_idx, MAX_TEMPERATURE))


def generate_with_retries(
    client: CompletionClient,
    spec: Spec,
    *,
    max_retries: int = 2,
    base_temperature: float = 0.4,
) -> GeneratedItem:
    """
    1) PromptManager로 (system, user) 구성
    2) 클라이언트 호출 → JSON 추출
    3) 별칭 정리 → 엄격 검증
    4) 실패 시 temperature 를 올려 재시도, 모두 실패하면 ItemGenerationError
    """
    system, user = PromptManager.generate(spec)
    attempts = max(0, max_retries) + 1
    last_errors: List[str] = []

    for attempt in range(attempts):
        temp = _temperature_for_attempt(attempt, base_temperature)
        log.info(
            "generation_attempt",
            extra={"attempt": attempt + 1, "attempts": attempts, "temperature": round(temp, 2),
                   "chain_id": spec.chain_id, "scene_id": spec.scene_id},
        )

        try:
            raw = client.complete(system, user, temperature=temp)
        except Exception as e:
            # 어댑터 예외는 기록 후 재시도
            last_errors.append(f"client error: {type(e).__name__}: {e}")
            log.warning("generation_client_error", extra={"attempt": attempt + 1, "error_type": type(e).__name__})
            continue

        try:
            obj = extract_json(raw)
        except ValueError as e:
            last_errors.append(f"JSON parse error: {e}")
            continue

        candidate = coerce_generated_item(obj)
        ok, reason = check_generated_item(spec, candidate)
        if not ok:
            last_errors.append(reason)
            log.info("generation_rejected", extra={"attempt": attempt + 1, "reason": reason})
            continue

        item = GeneratedItem.model_validate(candidate)
        log.info("generation_succeeded", extra={"attempt": attempt + 1, "chain_id": spec.chain_id})
        return item

    # 중복 제거 + 순서 유지
    errors = list(dict.fromkeys(last_errors))
    detail = "; ".join(errors)[:MAX_ERROR_DETAIL]
    log.warning("generation_exhausted", extra={"attempts": attempts, "detail": detail})
    raise ItemGenerationError(attempts, errors)

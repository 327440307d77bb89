# zhlink/specs/validators.py
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from zhlink.core.exceptions import SchemaViolationError
from zhlink.models.spec import GeneratedItem, Spec, SpecStep
from zhlink.specs.pattern_match import simple_regex_like_match
from zhlink.specs.reference import build_expected_reference_answer
from zhlink.specs.utils import normalize_for_compare, split_two_sentences

log = logging.getLogger("zhlink.validator")


def validate_with_model(model_cls, data):
    try:
        model_cls.model_validate(data)  # pydantic v2
        return True, None
    except ValidationError as e:
        return False, e.errors()


def check_step_pattern(step: SpecStep, sentence: str) -> Optional[str]:
    """강한 표지 + 구조 검사식만 확인 (명제 조각은 보지 않음). 통과 시 None"""
    for marker in step.strong_markers:
        if marker and marker not in sentence:
            return f"缺少强标记：'{marker}'"

    if not simple_regex_like_match(step.check_regex, sentence):
        return f"句式不匹配模式 {step.markers_zh}"

    return None


def check_sentence(step: SpecStep, sentence: str, expected_a: str, expected_b: str) -> Optional[str]:
    """명제 조각 A/B 포함 여부까지 확인하는 엄격 검사. 통과 시 None"""
    if expected_a not in sentence:
        return f"缺少命题片段A：'{expected_a}'"
    if expected_b not in sentence:
        return f"缺少命题片段B：'{expected_b}'"
    return check_step_pattern(step, sentence)


def _coerce_item(item: Union[GeneratedItem, Mapping[str, Any]]) -> GeneratedItem:
    if isinstance(item, GeneratedItem):
        return item
    ok, errors = validate_with_model(GeneratedItem, item)
    if not ok:
        fields = ", ".join(".".join(str(x) for x in e["loc"]) for e in errors)
        raise SchemaViolationError(f"generated item has invalid shape: {fields}")
    return GeneratedItem.model_validate(item)


def validate_generated_item(spec: Spec, item: Union[GeneratedItem, Mapping[str, Any]]) -> None:
    """
    외부 생성 후보가 spec과 정확히 일치하는지 엄격 검증 (부분 통과 없음)
      (a) seed 일치
      (b) 기준문이 정확히 두 문장
      (c) 각 문장이 템플릿 렌더링 결과와 공백 제외 일치
      (d) 각 문장이 명제 조각/강한 표지/구조 검사식을 모두 만족
    첫 번째 실패에서 SchemaViolationError
    """
    candidate = _coerce_item(item)

    if candidate.seed_zh.strip() != spec.seed.strip():
        raise SchemaViolationError("seed_zh does not match SPEC.seed exactly")

    got = split_two_sentences(candidate.reference_answer_zh)
    if got is None:
        raise SchemaViolationError("reference_answer_zh must contain exactly two sentences")

    expected = split_two_sentences(build_expected_reference_answer(spec))
    if expected is None:
        # 카탈로그/장면 데이터가 깨진 경우에만 발생
        raise SchemaViolationError("expected reference could not be split into two sentences")

    got_s1, got_s2 = got
    exp_s1, exp_s2 = expected
    if normalize_for_compare(got_s1) != normalize_for_compare(exp_s1):
        raise SchemaViolationError(
            "reference_answer_zh did not apply templates exactly to P1/P2/P3", sentence=1)
    if normalize_for_compare(got_s2) != normalize_for_compare(exp_s2):
        raise SchemaViolationError(
            "reference_answer_zh did not apply templates exactly to P1/P2/P3", sentence=2)

    props = spec.props
    err = check_sentence(spec.step1, got_s1, props.p1, props.p2)
    if err:
        raise SchemaViolationError(f"reference sentence1 invalid: {err}", sentence=1)
    err = check_sentence(spec.step2, got_s2, props.p2, props.p3)
    if err:
        raise SchemaViolationError(f"reference sentence2 invalid: {err}", sentence=2)


def check_generated_item(
    spec: Spec, item: Union[GeneratedItem, Mapping[str, Any]]
) -> Tuple[bool, Optional[str]]:
    """validate_generated_item 의 예외 없는 형태: (ok, message)"""
    try:
        validate_generated_item(spec, item)
        return True, None
    except SchemaViolationError as e:
        log.debug("generated item rejected",
                  extra={"chain_id": spec.chain_id, "scene_id": spec.scene_id, "reason": e.message})
        return False, e.message

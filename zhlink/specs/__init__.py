"""
두 단계 연결 문항 코어
샘플링 / 기준문 렌더링 / 엄격 검증 / 채점
"""
from zhlink.specs.pattern_match import simple_regex_like_match
from zhlink.specs.sampler import (
    SpecSampler,
    assemble_spec,
    difficulty_to_target_level,
    sample,
)
from zhlink.specs.reference import (
    build_challenge_en,
    build_compact_challenge_zh,
    build_expected_reference_answer,
    build_summary_en,
)
from zhlink.specs.validators import check_generated_item, validate_generated_item
from zhlink.specs.scoring import evaluate
from zhlink.specs.generate_with_retry import generate_with_retries

__all__ = [
    "simple_regex_like_match",
    "SpecSampler",
    "assemble_spec",
    "difficulty_to_target_level",
    "sample",
    "build_challenge_en",
    "build_compact_challenge_zh",
    "build_expected_reference_answer",
    "build_summary_en",
    "check_generated_item",
    "validate_generated_item",
    "evaluate",
    "generate_with_retries",
]

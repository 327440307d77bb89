# zhlink/models/spec.py
from __future__ import annotations

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from zhlink.models.catalog import PatternDef


class SpecStep(BaseModel):
    """체인 한 단계에 선택된 패턴의 완전한 스냅샷"""
    model_config = ConfigDict(frozen=True)

    relation: str
    pattern_id: str
    pattern_tpl: str
    markers_zh: str
    kind: str
    level: int
    check_regex: str
    strong_markers: Tuple[str, ...] = ()
    weak_markers: Tuple[str, ...] = ()
    seed_banned: Tuple[str, ...] = ()

    @classmethod
    def from_pattern(cls, relation: str, pattern: PatternDef) -> "SpecStep":
        return cls(
            relation=relation,
            pattern_id=pattern.id,
            pattern_tpl=pattern.tpl,
            markers_zh=pattern.markers_zh,
            kind=pattern.kind,
            level=pattern.level,
            check_regex=pattern.check_regex,
            strong_markers=pattern.strong_markers,
            weak_markers=pattern.weak_markers,
            seed_banned=pattern.seed_banned,
        )


class SpecProps(BaseModel):
    """장면 명제 P1/P2/P3 (직렬화 시 대문자 키)"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    p1: str = Field(alias="P1")
    p2: str = Field(alias="P2")
    p3: str = Field(alias="P3")


class Spec(BaseModel):
    """
    챌린지 1건에 대해 한 번 샘플링되는 불변 번들
    - 외부 생성기에 그대로 전달되므로 필드명은 고정된다.
    - 이후 힌트 렌더링/엄격 검증/채점은 모두 이 객체를 읽기만 한다.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str
    language: str
    mode: str

    chain_id: str
    chain_step1_relation: str
    chain_step2_relation: str
    scene_id: str
    scene_schema: str

    step1: SpecStep
    step2: SpecStep

    seed: str
    props: SpecProps

    def to_payload(self) -> Dict[str, Any]:
        """외부 전송용 평면 dict (P1/P2/P3 키 유지)"""
        return self.model_dump(mode="json", by_alias=True)


class GeneratedItem(BaseModel):
    """외부 생성기가 돌려준 후보 문항 (검증 전에는 신뢰하지 않음)"""
    seed_zh: str
    challenge_zh: str
    reference_answer_zh: str
    meta: Dict[str, Any] = Field(default_factory=dict)

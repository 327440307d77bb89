# zhlink/models/catalog.py
from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PatternDef(BaseModel):
    """연결 패턴 정의 (정적 카탈로그 레코드)"""
    model_config = ConfigDict(frozen=True)

    id: str
    relation: str
    level: int = Field(ge=1, le=3)
    kind: str                                  # "PAIR" | "SINGLE"
    tpl: str                                   # {A}, {B} 자리표시자 포함
    markers_zh: str                            # 사람이 읽는 표지 라벨 (예: "因为…所以…")
    strong_markers: Tuple[str, ...] = ()       # 문장에 반드시 있어야 하는 표지
    weak_markers: Tuple[str, ...] = ()         # 참고용
    seed_banned: Tuple[str, ...] = ()          # 시드에 있으면 안 되는 토큰
    check_regex: str                           # 제한된 정규식 부분집합 (^ $ 리터럴 .+)

    @field_validator("tpl")
    @classmethod
    def _tpl_has_slots(cls, v: str) -> str:
        if "{A}" not in v or "{B}" not in v:
            raise ValueError("pattern template must contain both {A} and {B}")
        return v


class ChainDef(BaseModel):
    """2단계 관계 체인 (step1 관계 → step2 관계, 장면 스키마)"""
    model_config = ConfigDict(frozen=True)

    id: str
    step1: str
    step2: str
    scene_schema: str


class SceneDef(BaseModel):
    """고정된 3슬롯 서사 조각"""
    # pydantic BaseModel.schema 와 이름이 겹치지 않도록 별칭 사용
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    schema_tag: str = Field(alias="schema")
    slots: Tuple[str, str, str]

    @property
    def p1(self) -> str:
        return self.slots[0]

    @property
    def p2(self) -> str:
        return self.slots[1]

    @property
    def p3(self) -> str:
        return self.slots[2]

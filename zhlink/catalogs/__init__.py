"""
정적 카탈로그 (패턴 / 체인 / 장면)
프로그램 수명 동안 변경되지 않는 읽기 전용 데이터
"""
from typing import Optional

from zhlink.catalogs.patterns import ALL_PATTERNS, PATTERNS_BY_RELATION, patterns_for_relation
from zhlink.catalogs.chains import CHAINS, BASIC_LEVEL_SCHEMAS, INTERMEDIATE_EXCLUDED_SCHEMAS
from zhlink.catalogs.scenes import SCENES, LEVEL2_PLUS_TOKENS, LEVEL3_PLUS_TOKENS
from zhlink.models.catalog import ChainDef, PatternDef, SceneDef

_PATTERNS_BY_ID = {p.id: p for p in ALL_PATTERNS}
_CHAINS_BY_ID = {c.id: c for c in CHAINS}
_SCENES_BY_ID = {s.id: s for s in SCENES}


def get_pattern(pattern_id: str) -> Optional[PatternDef]:
    return _PATTERNS_BY_ID.get(pattern_id)


def get_chain(chain_id: str) -> Optional[ChainDef]:
    return _CHAINS_BY_ID.get(chain_id)


def get_scene(scene_id: str) -> Optional[SceneDef]:
    return _SCENES_BY_ID.get(scene_id)


__all__ = [
    "ALL_PATTERNS",
    "PATTERNS_BY_RELATION",
    "patterns_for_relation",
    "CHAINS",
    "BASIC_LEVEL_SCHEMAS",
    "INTERMEDIATE_EXCLUDED_SCHEMAS",
    "SCENES",
    "LEVEL2_PLUS_TOKENS",
    "LEVEL3_PLUS_TOKENS",
    "get_pattern",
    "get_chain",
    "get_scene",
]

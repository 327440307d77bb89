# zhlink/catalogs/chains.py
from __future__ import annotations

from typing import Tuple

from zhlink.core.constants import Relations, SceneSchemas
from zhlink.models.catalog import ChainDef

CHAINS: Tuple[ChainDef, ...] = (
    ChainDef(id="zh_chain__cause_to_result__v1", step1=Relations.CAUSE, step2=Relations.RESULT,
             scene_schema=SceneSchemas.REASON_OUTCOME_FOLLOWUP),
    ChainDef(id="zh_chain__condition_to_result__v1", step1=Relations.CONDITION, step2=Relations.RESULT,
             scene_schema=SceneSchemas.CONDITION_OUTCOME_FOLLOWUP),
    ChainDef(id="zh_chain__time_to_result__v1", step1=Relations.TIME, step2=Relations.RESULT,
             scene_schema=SceneSchemas.TIME_EVENT_OUTCOME),
    ChainDef(id="zh_chain__contrast_to_result__v1", step1=Relations.CONTRAST, step2=Relations.RESULT,
             scene_schema=SceneSchemas.EXPECTATION_ACTUAL_CONSEQUENCE),
    ChainDef(id="zh_chain__choice_to_condition__v1", step1=Relations.CHOICE, step2=Relations.CONDITION,
             scene_schema=SceneSchemas.OPTION_A_OPTION_B_THEN_RULE),
    ChainDef(id="zh_chain__addition_to_result__v1", step1=Relations.ADDITION, step2=Relations.RESULT,
             scene_schema=SceneSchemas.FACT1_FACT2_INFERENCE),
    ChainDef(id="zh_chain__purpose_to_result__v1", step1=Relations.PURPOSE, step2=Relations.RESULT,
             scene_schema=SceneSchemas.ACTION_GOAL_EFFECT),
    ChainDef(id="zh_chain__time_to_contrast__v1", step1=Relations.TIME, step2=Relations.CONTRAST,
             scene_schema=SceneSchemas.TIME_THEN_NOW_CONTRAST),
    ChainDef(id="zh_chain__condition_to_contrast__v1", step1=Relations.CONDITION, step2=Relations.CONTRAST,
             scene_schema=SceneSchemas.CONDITION_EXPECTED_SURPRISE),
)

# 레벨 1(기초)에서 허용하는 장면 스키마
BASIC_LEVEL_SCHEMAS = frozenset({
    SceneSchemas.REASON_OUTCOME_FOLLOWUP,
    SceneSchemas.CONDITION_OUTCOME_FOLLOWUP,
    SceneSchemas.TIME_EVENT_OUTCOME,
    SceneSchemas.FACT1_FACT2_INFERENCE,
    SceneSchemas.ACTION_GOAL_EFFECT,
})

# 레벨 2(중급)에서 제외하는 장면 스키마
INTERMEDIATE_EXCLUDED_SCHEMAS = frozenset({
    SceneSchemas.CONDITION_EXPECTED_SURPRISE,
})

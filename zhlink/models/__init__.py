from zhlink.models.catalog import PatternDef, ChainDef, SceneDef
from zhlink.models.spec import SpecStep, SpecProps, Spec, GeneratedItem
from zhlink.models.challenge import EvaluationResult, Challenge

__all__ = [
    "PatternDef",
    "ChainDef",
    "SceneDef",
    "SpecStep",
    "SpecProps",
    "Spec",
    "GeneratedItem",
    "EvaluationResult",
    "Challenge",
]

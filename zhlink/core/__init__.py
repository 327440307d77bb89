"""
Core 모듈
설정, 상수, 예외 등 핵심 컴포넌트
"""
from zhlink.core.settings import settings, get_settings
from zhlink.core.constants import (
    SpecTags,
    Relations,
    PatternKinds,
    SceneSchemas,
    DifficultyLevels,
    SceneLimits,
    ScoringRules,
    Punctuation,
    ErrorCodes,
    ErrorMessages,
    ChallengeSources,
    HTTPHeaders,
)
from zhlink.core.exceptions import (
    AppException,
    ValidationError,
    SchemaViolationError,
    SamplingExhaustedError,
    ItemGenerationError,
)

__all__ = [
    # Settings
    "settings",
    "get_settings",

    # Constants
    "SpecTags",
    "Relations",
    "PatternKinds",
    "SceneSchemas",
    "DifficultyLevels",
    "SceneLimits",
    "ScoringRules",
    "Punctuation",
    "ErrorCodes",
    "ErrorMessages",
    "ChallengeSources",
    "HTTPHeaders",

    # Exceptions
    "AppException",
    "ValidationError",
    "SchemaViolationError",
    "SamplingExhaustedError",
    "ItemGenerationError",
]

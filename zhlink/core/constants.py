"""
상수 정의 모듈
매직 스트링을 상수로 관리하여 유지보수성 향상
"""


class SpecTags:
    """Spec 버전/언어/모드 태그"""
    VERSION = "core_plus_core.zh.v2"
    LANGUAGE = "zh"
    MODE = "core_plus_core"


class Relations:
    """연결 관계(수사적 관계) 코드"""
    ADDITION = "ADDITION"
    CHOICE = "CHOICE"
    CONTRAST = "CONTRAST"
    CAUSE = "CAUSE"
    RESULT = "RESULT"
    CONDITION = "CONDITION"
    TIME = "TIME"
    PURPOSE = "PURPOSE"

    ALL = [CAUSE, RESULT, CONDITION, CONTRAST, TIME, PURPOSE, ADDITION, CHOICE]


class PatternKinds:
    """패턴 구조 분류 (샘플링/검증에서는 참조하지 않음)"""
    PAIR = "PAIR"
    SINGLE = "SINGLE"

    ALL = [PAIR, SINGLE]


class SceneSchemas:
    """장면 스키마 태그"""
    REASON_OUTCOME_FOLLOWUP = "reason_outcome_followup"
    CONDITION_OUTCOME_FOLLOWUP = "condition_outcome_followup"
    TIME_EVENT_OUTCOME = "time_event_outcome"
    EXPECTATION_ACTUAL_CONSEQUENCE = "expectation_actual_consequence"
    OPTION_A_OPTION_B_THEN_RULE = "optionA_optionB_then_rule"
    FACT1_FACT2_INFERENCE = "fact1_fact2_inference"
    ACTION_GOAL_EFFECT = "action_goal_effect"
    TIME_THEN_NOW_CONTRAST = "time_then_now_contrast"
    CONDITION_EXPECTED_SURPRISE = "condition_expected_surprise"


class DifficultyLevels:
    """난이도 레벨 (HSK 등급에서 파생)"""
    BASIC = 1
    INTERMEDIATE = 2
    ADVANCED = 3

    ALL = [BASIC, INTERMEDIATE, ADVANCED]

    # 파싱할 수 없는 난이도 문자열의 기본값
    DEFAULT = INTERMEDIATE


class SceneLimits:
    """레벨별 장면 길이 상한 (슬롯당, 합계) - 문자 수 기준"""
    BASIC_SLOT = 12
    BASIC_TOTAL = 32
    INTERMEDIATE_SLOT = 16
    INTERMEDIATE_TOTAL = 44


class ScoringRules:
    """자유 답안 채점 감점 규칙"""
    FULL_SCORE = 100.0
    PASS_SCORE = 60.0
    SENTENCE_COUNT_PENALTY = 40.0
    STEP_PATTERN_PENALTY = 25.0
    SEED_MISSING_PENALTY = 15.0
    MARKER_BLEED_PENALTY = 8.0


class Punctuation:
    """문장 분리용 구두점"""
    FULL_STOP = "。"
    # 문장 끝에서 한 번에 제거되는 종결 부호
    TERMINALS = "。.!！?？"
    # 분리 전에 마침표로 치환되는 부호
    TO_FULL_STOP = "!！?？"


class ErrorCodes:
    """에러 코드"""
    VALIDATION_FAILED = "VALIDATION_FAILED"
    SAMPLING_EXHAUSTED = "SAMPLING_EXHAUSTED"
    SCHEMA_VIOLATION = "SCHEMA_VIOLATION"
    ITEM_GENERATION_FAILED = "ITEM_GENERATION_FAILED"
    REQUEST_VALIDATION = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_SERVER_ERROR"


class ErrorMessages:
    """사용자 친화적 에러 메시지"""
    INVALID_INPUT = "입력값이 올바르지 않습니다."
    SAMPLING_EXHAUSTED = "조건에 맞는 문항 구성을 찾지 못했습니다. 다시 시도하세요."
    SCHEMA_VIOLATION = "생성된 문항이 스펙과 일치하지 않습니다."
    ITEM_GENERATION_FAILED = "문항 생성에 실패했습니다. 잠시 후 다시 시도하세요."
    INTERNAL_ERROR = "서버 오류가 발생했습니다. 관리자에게 문의하세요."


class ChallengeSources:
    """챌린지 출처"""
    GENERATED = "generated"          # 외부 생성기 결과가 검증을 통과함
    DETERMINISTIC = "deterministic"  # 템플릿 렌더링 결과 그대로 사용

    ALL = [GENERATED, DETERMINISTIC]


class HTTPHeaders:
    """HTTP 헤더 상수"""
    REQUEST_ID = "X-Request-Id"

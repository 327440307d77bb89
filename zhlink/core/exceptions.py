"""
커스텀 예외 클래스 정의
일관된 에러 처리를 위한 예외 계층 구조
"""
from typing import Any, Dict, List, Optional
from fastapi import status

from zhlink.core.constants import ErrorCodes, ErrorMessages


class AppException(Exception):
    """
    기본 애플리케이션 예외
    모든 커스텀 예외의 베이스 클래스
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """예외를 딕셔너리로 변환"""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# ===========================================
# 검증 관련 예외
# ===========================================

class ValidationError(AppException):
    """입력 검증 실패 예외"""

    def __init__(
        self,
        message: str = ErrorMessages.INVALID_INPUT,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            code=ErrorCodes.VALIDATION_FAILED,
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details
        )


class SchemaViolationError(AppException):
    """
    외부 생성 문항이 스펙과 정확히 일치하지 않음
    해당 후보는 폐기하고 재생성해야 한다.
    """

    def __init__(
        self,
        message: str = ErrorMessages.SCHEMA_VIOLATION,
        sentence: Optional[int] = None
    ):
        details = {}
        if sentence is not None:
            details["sentence"] = sentence
        super().__init__(
            code=ErrorCodes.SCHEMA_VIOLATION,
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details
        )


# ===========================================
# 샘플링/생성 관련 예외
# ===========================================

class SamplingExhaustedError(AppException):
    """
    재시도 한도 내에서 유효한 (chain, pattern, pattern, scene) 조합을 찾지 못함
    복구 가능: 한도를 늘리거나 난이도를 바꿔 다시 시도한다.
    """

    def __init__(
        self,
        difficulty: str,
        target_level: int,
        max_tries: int,
        message: str = ErrorMessages.SAMPLING_EXHAUSTED
    ):
        super().__init__(
            code=ErrorCodes.SAMPLING_EXHAUSTED,
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details={
                "difficulty": difficulty,
                "target_level": target_level,
                "max_tries": max_tries,
            }
        )


class ItemGenerationError(AppException):
    """외부 생성기 재시도가 모두 실패함"""

    def __init__(
        self,
        attempts: int,
        errors: Optional[List[str]] = None,
        message: str = ErrorMessages.ITEM_GENERATION_FAILED
    ):
        super().__init__(
            code=ErrorCodes.ITEM_GENERATION_FAILED,
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details={"attempts": attempts, "errors": errors or []}
        )

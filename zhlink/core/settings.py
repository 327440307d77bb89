"""
환경 설정 모듈
환경별 설정을 관리하고 유효성 검증 수행
"""
import os
from typing import List
from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class BaseConfig(BaseSettings):
    """
    기본 설정 클래스
    모든 환경에서 공통으로 사용되는 설정
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # 애플리케이션 설정
    # ===========================================
    SERVICE_NAME: str = Field(default="zhlink-itemgen")
    ENV: str = Field(default="development")
    LOG_LEVEL: str = Field(default="INFO")
    DEBUG: bool = Field(default=False)

    # ===========================================
    # 샘플링 설정
    # ===========================================
    DEFAULT_DIFFICULTY: str = Field(default="hsk3")
    SAMPLE_MAX_TRIES: int = Field(default=80)

    # ===========================================
    # 외부 생성기 설정
    # ===========================================
    GENERATE_MAX_RETRIES: int = Field(default=2)
    GENERATE_BASE_TEMPERATURE: float = Field(default=0.4)

    # ===========================================
    # CORS 설정
    # ===========================================
    CORS_ORIGINS: str = Field(default="http://localhost:3000")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v_upper

    @field_validator("SAMPLE_MAX_TRIES")
    @classmethod
    def validate_max_tries(cls, v: int) -> int:
        if v < 1:
            raise ValueError("SAMPLE_MAX_TRIES must be >= 1")
        return v

    @cached_property
    def cors_origins_list(self) -> List[str]:
        """CORS origins를 리스트로 반환"""
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @cached_property
    def is_development(self) -> bool:
        """개발 환경 여부"""
        return self.ENV.lower() in ("dev", "development", "local")

    @cached_property
    def is_production(self) -> bool:
        """운영 환경 여부"""
        return self.ENV.lower() in ("prod", "production")


class DevelopmentConfig(BaseConfig):
    """개발 환경 설정"""
    ENV: str = Field(default="development")
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="DEBUG")


class StagingConfig(BaseConfig):
    """스테이징 환경 설정"""
    ENV: str = Field(default="staging")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")


class ProductionConfig(BaseConfig):
    """운영 환경 설정"""
    ENV: str = Field(default="production")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="WARNING")


class TestConfig(BaseConfig):
    """테스트 환경 설정"""
    ENV: str = Field(default="test")
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="DEBUG")
    # 고정 시드 테스트용 한도
    SAMPLE_MAX_TRIES: int = Field(default=200)
    GENERATE_MAX_RETRIES: int = Field(default=1)


def get_settings() -> BaseConfig:
    """
    환경에 맞는 설정 객체 반환

    ENV 환경변수에 따라 적절한 설정 클래스를 선택
    """
    env = os.getenv("ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "dev": DevelopmentConfig,
        "local": DevelopmentConfig,
        "staging": StagingConfig,
        "stage": StagingConfig,
        "production": ProductionConfig,
        "prod": ProductionConfig,
        "test": TestConfig,
        "testing": TestConfig,
    }

    config_class = config_map.get(env, DevelopmentConfig)
    return config_class()


# 전역 설정 인스턴스
settings = get_settings()


# ===========================================
# 설정 검증 함수
# ===========================================

def validate_required_settings() -> List[str]:
    """
    설정 조합이 올바른지 검증

    Returns:
        문제가 있는 설정 이름 목록
    """
    problems = []

    if settings.GENERATE_MAX_RETRIES < 0:
        problems.append("GENERATE_MAX_RETRIES")

    if not 0.0 <= settings.GENERATE_BASE_TEMPERATURE <= 2.0:
        problems.append("GENERATE_BASE_TEMPERATURE")

    # 운영 환경에서는 디버그 노출 금지
    if settings.is_production and settings.DEBUG:
        problems.append("DEBUG")

    return problems

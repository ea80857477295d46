"""
환경 설정 모듈
환경별 설정을 관리하고 유효성 검증 수행
"""
import os
from typing import Optional, List
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
    SERVICE_NAME: str = Field(default="quizdesk")
    ENV: str = Field(default="development")
    LOG_LEVEL: str = Field(default="INFO")
    DEBUG: bool = Field(default=False)

    # ===========================================
    # Redis 설정 (과제 초안 세션 저장)
    # ===========================================
    REDIS_HOST: str = Field(default="localhost")
    REDIS_PORT: int = Field(default=6379)
    REDIS_DB: int = Field(default=0)
    REDIS_URL: Optional[str] = None  # 설정 시 HOST/PORT/DB 대신 사용
    DRAFT_SESSION_TTL: int = Field(default=7200)  # 2시간

    # ===========================================
    # 첨부파일 설정
    # ===========================================
    MAX_UPLOAD_BYTES: int = Field(default=10 * 1024 * 1024)  # 10MB

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

    @field_validator("DRAFT_SESSION_TTL", "MAX_UPLOAD_BYTES")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be a positive integer")
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
    REDIS_HOST: str = Field(default="localhost")
    REDIS_DB: int = Field(default=1)  # 테스트용 별도 DB


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


def print_settings_summary():
    """설정 요약 출력 (민감 정보 제외)"""
    print(f"""
    ========================================
    QuizDesk API - Settings
    ========================================
    Environment: {settings.ENV}
    Debug: {settings.DEBUG}
    Log Level: {settings.LOG_LEVEL}
    Redis: {settings.REDIS_HOST}:{settings.REDIS_PORT}
    Draft TTL: {settings.DRAFT_SESSION_TTL}s
    CORS Origins: {settings.cors_origins_list}
    ========================================
    """)

"""
Zenify Configuration
환경변수 기반 설정 관리
"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Service settings
    APP_NAME: str = Field(default="Zenify", description="서비스 이름")
    HOST: str = Field(default="0.0.0.0", description="바인딩 호스트")
    PORT: int = Field(default=3000, ge=1, le=65535, description="서비스 포트")
    LOG_LEVEL: str = Field(default="INFO", description="로그 레벨")

    # Catalog settings
    CATALOG_PATH: str = Field(
        default="",
        description="카탈로그 JSON 경로 ({mood: [song, ...]}), 비어 있으면 내장 데이터 사용"
    )

    # Client settings
    API_BASE_URL: str = Field(default="https://zenify-1.onrender.com", description="카탈로그 API 주소")
    SAMPLE_SIZE: int = Field(default=50, ge=1, le=500, description="화면에 표시할 최대 곡 수")
    REQUEST_TIMEOUT_SEC: float = Field(default=10.0, gt=0.0, description="API 요청 타임아웃 (초)")

    # Local storage settings
    STORAGE_BACKEND: Literal["memory", "file", "redis"] = Field(default="file", description="로컬 저장소 종류")
    STORAGE_PATH: str = Field(default=".zenify/storage.json", description="파일 저장소 경로")
    REDIS_URL: str = Field(default="redis://localhost:6379/0", description="Redis 연결 URL")
    STORAGE_PREFIX: str = Field(default="zenify:", description="Redis 키 접두사")

    # .env 파일도 환경변수처럼 읽고, 변수 이름 대소문자를 구분한다
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )


def get_settings() -> Settings:
    return Settings()

# config.py
import os
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    프로젝트 전역 설정 관리 (Pydantic V2)
    .env 파일에서 환경 변수를 로드하며, 없을 경우 기본값을 사용합니다.

    Frequency-recognition thresholds are fixed heuristics and deliberately
    not exposed here.
    """

    # Project Info
    PROJECT_NAME: str = "freqCall"
    VERSION: str = "1.0.0"

    # Input Settings
    DATA_ROOT: str = "."
    FILE_EXTENSION: str = "csv"

    # Logging Settings
    LOG_DIR: str = "./logs"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False

    # Output Settings
    SHOW_PROGRESS: bool = True

    # .env 파일 로드 설정
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def log_file(self) -> str:
        return os.path.join(self.LOG_DIR, "freqcall.log")


# 싱글톤 인스턴스 생성
settings = Settings()

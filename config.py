from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    log_level: str = "INFO"
    # HTTP API 與 CLI 共用的輸入行數上限
    max_input_lines: int = 100_000
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_file = ".env"


@lru_cache()
def get_settings():
    return Settings()

from pydantic_settings import BaseSettings

from .scoring import PLACEHOLDER_TITLE, SEMANTIC_THRESHOLD, STUB_SEMANTIC_SCORE

class Settings(BaseSettings):
    app_name: str = "Resume MVP API"
    placeholder_title: str = PLACEHOLDER_TITLE
    semantic_threshold: float = SEMANTIC_THRESHOLD
    stub_semantic_score: float = STUB_SEMANTIC_SCORE
    cors_origins: list[str] = ["*"]
    docs_url: str = "/docs"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_file = ".env"

settings = Settings()

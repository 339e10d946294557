from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Interview Generator"
    APP_ADDRESS: str = "0.0.0.0"
    APP_PORT: int = 8000

    OPENROUTER_API_KEY: str
    OPENROUTER_MODEL: str = "mistralai/devstral-2512:free"
    OPENROUTER_URL: str = "https://openrouter.ai/api/v1/chat/completions"
    OPENROUTER_TIMEOUT: float | None = None

    STORAGE_BACKEND: str = "memory"
    FIRESTORE_PROJECT: str | None = None
    INTERVIEWS_COLLECTION: str = "interviews"

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[2] / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()

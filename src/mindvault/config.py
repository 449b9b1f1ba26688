from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    gemini_api_key: str = Field(default="", alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="", alias="GEMINI_MODEL")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1",
        alias="GEMINI_BASE_URL",
    )
    gemini_timeout_seconds: float | None = Field(default=None, alias="GEMINI_TIMEOUT_SECONDS")

    def model_post_init(self, __context) -> None:  # type: ignore[override]
        self.gemini_api_key = self.gemini_api_key.strip()
        self.gemini_model = self.gemini_model.strip()
        self.gemini_base_url = self.gemini_base_url.strip().rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

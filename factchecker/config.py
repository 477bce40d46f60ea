from pydantic_settings import BaseSettings
from typing import List, Optional
import os

class Settings(BaseSettings):
    API_KEY: Optional[str] = None  # Gemini API key; checked per request, not at startup
    MODEL_NAME: str = "gemini-3-flash-preview"
    ALLOWED_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @property
    def has_api_key(self) -> bool:
        return bool((self.API_KEY or "").strip())

def load_settings() -> Settings:
    return Settings(_env_file=os.getenv("ENV_FILE", ".env"), _env_file_encoding="utf-8")

# settings.py
import os
from pydantic import BaseModel, ConfigDict, Field


class ConfigurationError(RuntimeError):
    """Raised when the process cannot start with the current environment."""


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    GEMINI_API_KEY: str = Field(default_factory=lambda: os.getenv("GEMINI_API_KEY", ""))
    MODEL_NAME: str = Field(default_factory=lambda: os.getenv("MODEL_NAME", "gemini-2.5-flash"))
    MAX_OUTPUT_TOKENS: int = Field(default_factory=lambda: int(os.getenv("MAX_OUTPUT_TOKENS", "1000")))
    HOST: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    PORT: int = Field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    CORS_ALLOW_ORIGINS: str = Field(default_factory=lambda: os.getenv("CORS_ALLOW_ORIGINS", "*"))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


def load_settings() -> Settings:
    settings = Settings()
    if not settings.GEMINI_API_KEY:
        raise ConfigurationError("A variável de ambiente 'GEMINI_API_KEY' não foi encontrada.")
    return settings

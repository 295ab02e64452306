"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "mortgage-calculator"
    log_level: str = "INFO"

    # HTTP
    api_prefix: str = "/api/mortgage"
    docs_enabled: bool = True
    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()

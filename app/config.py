from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str

    ENVIRONMENT: str = "development"

    # API
    API_V1_PREFIX: str = "/api/v1"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Paginação (o limite máximo de 200 é fixo no service)
    DEFAULT_PAGE_SIZE: int = 20

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_PER_IP: str = "120/minute"
    RATE_LIMIT_STORAGE_URI: str = "memory://"  # ex: redis://localhost:6379/0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )


settings = Settings()

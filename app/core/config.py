"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = "Restaurant Ledger API"
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    log_level: str = getenv("LOG_LEVEL", "INFO")
    database_url: str = getenv("DATABASE_URL", "sqlite:///./restaurant_ledger.db")
    db_timeout_seconds: int = int(getenv("DB_TIMEOUT_SECONDS", "15"))
    jwt_secret_key: str = getenv("JWT_SECRET_KEY", "dev-only-change-me-to-a-long-random-secret")
    jwt_algorithm: str = getenv("JWT_ALGORITHM", "HS256")
    jwt_expire_minutes: int = int(getenv("JWT_EXPIRE_MINUTES", "60"))
    cors_origins: list[str] = [
        origin.strip() for origin in getenv("CORS_ORIGINS", "http://localhost:3001").split(",") if origin.strip()
    ]


settings: Settings = Settings()

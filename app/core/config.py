"""
Application configuration.
Values come from environment variables, falling back to a local .env file
so development works without any exported variables.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_ENV: str = "development"
    DATABASE_URL: str
    JWT_SECRET_KEY: str = ""
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 24 hours, same as the old demo cookie
    SESSION_COOKIE_NAME: str = "fdp-session"

    # Job numbers look like FDP-2026-042
    COMPANY_CODE: str = "FDP"

    # Store call bounds
    DB_POOL_TIMEOUT_SECONDS: float = 10.0
    DB_COMMAND_TIMEOUT_SECONDS: float = 15.0
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    SEED_DEMO_ACCOUNTS: bool = True
    CORS_ORIGINS: list[str] = ["*"]

    @field_validator("COMPANY_CODE")
    @classmethod
    def three_letter_company_code(cls, value: str) -> str:
        value = value.strip()
        if len(value) != 3 or not (value.isascii() and value.isalpha()):
            raise ValueError("COMPANY_CODE must be exactly 3 letters")
        return value.upper()

    class Config:
        env_file = ".env"


settings = Settings()

# Validate critical security settings
if not settings.JWT_SECRET_KEY:
    raise ValueError(
        "JWT_SECRET_KEY is not set. Export it as an environment variable or add it to .env. "
        "Generate one with: python -c 'import secrets; print(secrets.token_urlsafe(32))'"
    )

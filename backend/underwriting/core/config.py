"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────
    POSTGRES_USER: str = "underwriting_user"
    POSTGRES_PASSWORD: str = "underwriting_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "underwriting_db"
    DATABASE_POOL_SIZE: int = 20

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for app runtime (asyncpg)."""
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # ── Underwriting rules ────────────────────
    PERCENTAGE_SUM_TOLERANCE: float = 0.01
    PREMIUM_MATCH_TOLERANCE: float = 0.01
    CHILD_AGE_CEILING: int = 25
    HEALTH_START_NOT_IN_PAST: bool = True

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()

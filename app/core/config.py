"""
Application configuration
=========================
Settings are read from environment variables (and an optional .env file).
"""
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Project
    PROJECT_NAME: str = "Farm Cost Tracker API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "https://vegibec-rendement.netlify.app",
    ]

    # Database
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "farm_costs"
    DB_SSL: bool = False
    AUTO_CREATE_TABLES: bool = True

    # Auth
    SECRET_KEY: str = "super_secret"
    REFRESH_SECRET_KEY: str = "super_refresh_secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7
    REFRESH_COOKIE_NAME: str = "refreshToken"

    # Years up to this one are summarised from the legacy other_costs table
    OTHER_COSTS_LEGACY_LAST_YEAR: int = 2024

    @property
    def database_url(self) -> str:
        """SQLAlchemy connection URL"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )
        if self.DB_SSL:
            url += "?sslmode=require"
        return url

    @property
    def alembic_database_url(self) -> str:
        """database_url with % doubled for alembic.ini (configparser) interpolation"""
        return self.database_url.replace("%", "%%")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()

from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """
    Application settings
    Loaded from the environment and the .env file
    """
    # Database
    DATABASE_URL: str = "sqlite:///./database.sqlite"

    # App
    PROJECT_NAME: str = "Inventory Management"
    ENVIRONMENT: str = "production"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Startup
    SEED_DEMO_DATA: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names from the environment"""
        return v.upper()

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()

from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from typing import Optional

load_dotenv()

class Settings(BaseSettings):
    ENV: str = "development"

    # Database settings
    DB_PROVIDER: str = "postgres"  # postgres, mysql or sqlite
    DB_HOST: str = "127.0.0.1"
    DB_PORT: int = 5432
    DB_NAME: str = "employees"
    DB_USER: str = "employees"
    DB_PASSWORD: str = ""
    DB_FILENAME: Optional[str] = None  # sqlite only
    DB_CREATE_TABLES: bool = True
    DB_TRANSACTION_RETRIES: int = 3

    # Server settings
    ADDR: str = "127.0.0.1"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def is_development(self) -> bool:
        return self.ENV == "development"

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_PROVIDER == "sqlite":
            return f"sqlite:///{self.DB_FILENAME}"
        return f"{self.DB_PROVIDER}://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

settings = Settings()

# Validate settings
assert settings.DB_PROVIDER in ("postgres", "mysql", "sqlite"), "DB_PROVIDER must be postgres, mysql or sqlite"
assert settings.DB_TRANSACTION_RETRIES >= 0, "DB_TRANSACTION_RETRIES must not be negative"

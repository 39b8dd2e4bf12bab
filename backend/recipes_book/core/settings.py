from datetime import timedelta

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Recipes Book"
    DATABASE_URL: str = "sqlite:///./recipes.db"

    # Server
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8080

    # Token Config (must be exactly 32 characters)
    TOKEN_SYMMETRIC_KEY: str = "12345678901234567890123456789012"
    ACCESS_TOKEN_DURATION_MINUTES: int = 15

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env")

    @property
    def access_token_duration(self) -> timedelta:
        return timedelta(minutes=self.ACCESS_TOKEN_DURATION_MINUTES)


settings = Settings()

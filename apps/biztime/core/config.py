from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "BizTime API"

    # Any SQLAlchemy URL; SQLite file next to the working directory by default
    DATABASE_URL: str = "sqlite:///./biztime.db"
    SQL_ECHO: bool = False

    # Comma-separated list, "*" allows everything
    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()

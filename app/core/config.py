from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Bearer token for /api/sync. Пусто = sync всегда отклоняется.
    ADMIN_TOKEN: str | None = None

    LOG_LEVEL: str = "INFO"
    STATIC_DIR: str = "static"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()

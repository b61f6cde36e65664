from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    TIMEZONE: str = "Europe/London"
    WEEK_STARTS_ON: str = "sunday"

    LESSON_START_HOUR: int = 6
    LESSON_END_HOUR: int = 20
    LESSON_SLOT_MINUTES: int = 60

    BOOKING_API_BASE_URL: str | None = None
    BOOKING_API_KEY: str | None = None
    BOOKING_API_TIMEOUT_SECONDS: float = 10.0


settings = Settings()

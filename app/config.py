from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "dev"
    log_level: str = "INFO"
    timezone: str | None = None  # IANA name, e.g. "Asia/Kolkata"; host clock when unset
    max_text_length: int = 20000

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False)


settings = Settings()

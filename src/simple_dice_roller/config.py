from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_DICE_ROLLER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Which tools the server exposes.
    average_tool_enabled: bool = True
    simulate_tool_enabled: bool = False

    log_level: str = "INFO"


settings = Settings()

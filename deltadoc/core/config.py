from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the HTTP service.
    Override with environment variables, e.g. DELTADOC_LOG_LEVEL=DEBUG
    """

    log_level: str = Field(default="INFO", description="Root logger level")
    api_prefix: str = Field(default="/api/v1", description="Prefix for versioned routes")
    max_body_bytes: int = Field(default=1_048_576, description="Largest accepted delta body")

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="DELTADOC_",
    )

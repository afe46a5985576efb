"""Settings for the probe. Only operational knobs; probe targets come from the request."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_json: bool = Field(False, validation_alias="LOG_JSON")

    database_backend: str = Field("postgres", validation_alias="DATABASE_BACKEND")
    database_connect_timeout_seconds: int = Field(10, gt=0, validation_alias="DATABASE_CONNECT_TIMEOUT_SECONDS")

    # When true a driver error during SELECT 1 ends the probe instead of counting as "not ready".
    query_errors_fatal: bool = Field(False, validation_alias="QUERY_ERRORS_FATAL")
    keeper_watch_interval_seconds: float = Field(1.0, gt=0, validation_alias="KEEPER_WATCH_INTERVAL_SECONDS")

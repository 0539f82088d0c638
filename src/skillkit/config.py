"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "skillkit"

    # Local HTTP listener, used whenever we are not running inside Lambda
    http_host: str = "0.0.0.0"
    http_port: int = 20123

    # Speech templates fall back to this locale when no translation matches
    default_locale: str = "en-US"

    # Request logging. Both leak user data, so keep them off outside dev/staging.
    log_request_json: bool = False
    log_response_speech: bool = False

    class Config:
        env_prefix = "SKILLKIT_"
        case_sensitive = False


settings = Settings()

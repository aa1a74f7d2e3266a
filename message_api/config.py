import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    database_url: str = "sqlite:///./messages.db"
    log_level: str = "INFO"
    cors_allowed_origins: str = "*"

    class Config:
        env_file = ".env"
        extra = "ignore"


# Global settings instance
_settings: Settings | None = None

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def get_settings() -> Settings:
    """Get application settings.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure_logging(level: str | None = None) -> None:
    """Attach a single stream handler to the root logger.

    Calling this more than once only updates the level.

    Args:
        level: Logging level name, defaults to the configured ``log_level``
    """
    level_name = (level or get_settings().log_level).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    if any(getattr(handler, "_message_api", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler._message_api = True  # type: ignore[attr-defined]
    root.addHandler(handler)


def allowed_origins() -> list[str]:
    """Parse the comma-separated CORS origins setting.

    Returns:
        ``["*"]`` when unset or wildcard, otherwise the listed origins
    """
    cors_env = get_settings().cors_allowed_origins
    if cors_env.strip() == "*" or cors_env.strip() == "":
        return ["*"]
    return [o.strip() for o in cors_env.split(",") if o.strip()]

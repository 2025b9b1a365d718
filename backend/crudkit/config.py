import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_PACKAGE_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _PACKAGE_DIR.parent
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "crudkit"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./crudkit.db"
    database_echo: bool = False              # Echo every SQL statement to the log

    # Session cookie used for flash messages
    session_secret_key: str = "change-me"
    session_cookie: str = "crudkit_session"

    # Jinja2 views (one sub-directory per controller)
    templates_dir: str = str(_PACKAGE_DIR / "presentation" / "templates")

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_crud: str = "INFO"             # CRUD controllers and services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if self.app_env == "production" and self.session_secret_key == "change-me":
            _config_logger.warning(
                "SESSION_SECRET_KEY is not configured; flash messages are signed with the default key"
            )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()

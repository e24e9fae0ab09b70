"""Runtime configuration for the CookMeet API.

Values come from, highest priority first:

1. process environment variables
2. the file named by ``COOKMEET_ENV_FILE`` (relative paths are taken
   from the project root)
3. ``config/.env.dev`` for local development
4. ``config/.env`` for containers
5. the defaults declared on ``Settings``
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "COOKMEET_ENV_FILE"


def _project_root() -> Path:
    """Nearest ancestor holding ``config/`` or ``.git/``."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / ".git").is_dir():
            return candidate
    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    return _project_root() / "config"


def _env_file() -> Optional[Path]:
    candidates: list[Path] = []

    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _project_root() / path)

    config_dir = get_config_dir()
    candidates += [config_dir / ".env.dev", config_dir / ".env"]

    return next((path for path in candidates if path.exists()), None)


class Settings(BaseSettings):
    """Typed settings; field names map to upper-case environment variables."""

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "CookMeet"
    log_level: str = "INFO"

    # Required: there is no safe default for the signing key
    jwt_secret_key: SecretStr
    jwt_access_token_expire_hours: int = 12

    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "cookmeet"
    # Takes precedence over the postgres_* parts, e.g. sqlite+aiosqlite:///./dev.db
    database_dsn: Optional[str] = None

    api_host: str = "0.0.0.0"  # NOQA: S104
    api_port: int = 8081
    api_debug: bool = False
    api_cors_origins: str = "http://localhost:3000"

    # Session and CSRF cookies
    api_cookie_secure: bool = True
    api_cookie_samesite: Literal["lax", "strict", "none"] = "none"
    api_cookie_domain: Optional[str] = None
    api_cookie_max_age_hours: int = 24
    csrf_enabled: bool = True

    storage_backend: Literal["local", "s3"] = "local"
    storage_bucket: str = "cookmeet"
    storage_local_dir: str = "./data/media"
    storage_public_base_url: str = "http://localhost:8081/media"
    storage_timeout_seconds: float = 30.0
    storage_signed_url_expire_days: int = 7

    s3_region: Optional[str] = None
    s3_endpoint_url: Optional[str] = None
    s3_access_key_id: Optional[str] = None
    s3_secret_access_key: Optional[SecretStr] = None

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value) if value else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_dsn:
            return self.database_dsn
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [
            origin.strip()
            for origin in self.api_cors_origins.split(",")
            if origin.strip()
        ]

    @property
    def cookie_max_age_seconds(self) -> int:
        return self.api_cookie_max_age_hours * 3600


@lru_cache
def get_settings() -> Settings:
    """Settings for this process, read once."""
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    get_settings.cache_clear()

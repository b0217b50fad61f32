import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    env: str
    database_url: str
    log_level: str
    auto_create_schema: bool


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _is_production(env: str) -> bool:
    return env.lower() in ("prod", "production")


def load_settings() -> Settings:
    env = _getenv("ENV", "development")
    auto_default = "0" if _is_production(env) else "1"
    return Settings(
        env=env,
        database_url=_getenv("DATABASE_URL", "sqlite:///customers.db"),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
        auto_create_schema=_getenv("AUTO_CREATE_SCHEMA", auto_default) in ("1", "true", "yes", "on"),
    )


def load_config() -> dict:
    s = load_settings()
    return {
        "ENV": s.env,
        "DATABASE_URL": s.database_url,
        "LOG_LEVEL": s.log_level,
        "AUTO_CREATE_SCHEMA": s.auto_create_schema,
        "IS_PRODUCTION": _is_production(s.env),
    }

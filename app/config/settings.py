# app/config/settings.py
# Environment-driven application settings

import os
from typing import List, Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

REQUIRED_ENV_VARS = ("JWT_SECRET", "DATABASE_URL")

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]

# Not read from the environment
ACCESS_TOKEN_EXPIRE_DAYS = 7
BCRYPT_ROUNDS = 10

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class MissingEnvironmentVariable(RuntimeError):
    """Raised when a mandatory environment variable is not set"""

    def __init__(self, name: str):
        super().__init__(f"Missing required environment variable: {name}")
        self.name = name


class InvalidEnvironmentVariable(RuntimeError):
    """Raised when an environment variable holds an unusable value"""

    def __init__(self, name: str, value: str, allowed):
        super().__init__(f"Invalid value for {name}: '{value}'. Allowed: {', '.join(allowed)}")
        self.name = name


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings read from the process environment"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        env = os.environ if environ is None else environ

        for name in REQUIRED_ENV_VARS:
            if not env.get(name):
                raise MissingEnvironmentVariable(name)

        self.jwt_secret: str = env["JWT_SECRET"]
        self.jwt_algorithm: str = env.get("JWT_ALGORITHM", "HS256")
        self.database_url: str = env["DATABASE_URL"]
        self.db_sslmode: Optional[str] = env.get("DB_SSLMODE") or None

        self.host: str = env.get("HOST", "0.0.0.0")
        self.port: int = int(env.get("PORT", "8000"))
        self.reload: bool = _as_bool(env.get("RELOAD", "true"))
        self.app_env: str = env.get("APP_ENV", "development").lower()
        self.log_level: str = self._parse_log_level(env.get("LOG_LEVEL"))
        self.cors_origins: List[str] = self._parse_origins(env.get("CORS_ORIGINS"))

    @staticmethod
    def _parse_log_level(raw: Optional[str]) -> str:
        level = (raw or "INFO").strip().upper()
        if level not in LOG_LEVELS:
            raise InvalidEnvironmentVariable("LOG_LEVEL", raw, LOG_LEVELS)
        return level

    @staticmethod
    def _parse_origins(raw: Optional[str]) -> List[str]:
        if not raw:
            return list(DEFAULT_CORS_ORIGINS)
        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.lower().startswith("sqlite")


settings = Settings()

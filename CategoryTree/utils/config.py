import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///categorytree.db"


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment"""
    database_url: str = DEFAULT_DATABASE_URL
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    sql_echo: bool = False
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_settings() -> Settings:
    """Load settings from environment variables, falling back to defaults"""
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        sql_echo=_as_bool(os.getenv("SQL_ECHO", "false")),
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
    )

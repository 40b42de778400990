# pomoauth/config.py

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv


TRUTHY = {"1", "true", "yes", "y"}
SAMESITE_VALUES = ("lax", "strict", "none")


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, read once when the app is built.
    """
    secret_key: Optional[str] = None
    database_url: str = "sqlite:///./data/app.db"
    token_expire_days: int = 30
    cookie_secure: bool = False
    cookie_samesite: str = "lax"
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = "INFO"

    def __post_init__(self):
        if self.token_expire_days <= 0:
            raise ValueError(f"TOKEN_EXPIRE_DAYS must be positive, got {self.token_expire_days}")
        if self.cookie_samesite not in SAMESITE_VALUES:
            raise ValueError(
                f"COOKIE_SAMESITE must be one of {', '.join(SAMESITE_VALUES)}, got {self.cookie_samesite!r}"
            )

    @property
    def token_max_age(self) -> int:
        return self.token_expire_days * 24 * 60 * 60


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        secret_key=os.getenv("JWT_SECRET_KEY") or os.getenv("SECRET") or None,
        database_url=os.getenv("DATABASE_URL", "sqlite:///./data/app.db"),
        token_expire_days=int(os.getenv("TOKEN_EXPIRE_DAYS", "30")),
        cookie_secure=os.getenv("COOKIE_SECURE", "false").lower() in TRUTHY,
        cookie_samesite=os.getenv("COOKIE_SAMESITE", "lax").lower(),
        cors_origins=_split(os.getenv("CORS_ORIGINS", "http://localhost:3000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

# shared/config.py
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    database_url: str
    secret_key: str
    algorithm: str
    access_token_expire_minutes: int
    api_prefix: str
    hidden_super_admin_email: Optional[str]
    hidden_super_admin_password: Optional[str]
    openai_api_key: Optional[str]
    openai_model: str
    openai_base_url: str
    openai_timeout_seconds: float
    log_level: str
    host: str
    port: int


def load_settings() -> Settings:
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./app.db"),
        secret_key=os.getenv("SECRET_KEY", "your-secret-key"),
        algorithm="HS256",
        access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")),
        api_prefix=os.getenv("API_PREFIX", "/api/v1").rstrip("/"),
        hidden_super_admin_email=os.getenv("HIDDEN_SUPER_ADMIN_EMAIL") or None,
        hidden_super_admin_password=os.getenv("HIDDEN_SUPER_ADMIN_PASSWORD") or None,
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),
        openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1/chat/completions"),
        openai_timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


settings = load_settings()

"""
Application settings loaded from environment variables.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Nylas application ───────────────────────────────────────────────
    nylas_client_id: str = ""
    nylas_client_secret: str = ""       # also the HMAC secret for webhooks
    nylas_api_uri: str = "https://api.us.nylas.com"

    # ── Security Secrets ──────────────────────────────────────────────────
    encryption_key: str = ""            # 32-byte AES-256 key for stored passwords

    # ── OAuth Providers ──────────────────────────────────────────────────
    google_client_id: str = ""
    google_client_secret: str = ""
    microsoft_client_id: str = ""
    microsoft_client_secret: str = ""
    domain: str = "http://localhost:8000"   # base URL for OAuth callbacks

    debug: bool = False

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Build the settings once per process."""
    return Settings()

"""Application settings, read from the environment and an optional .env file."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class FestivalSettings(BaseSettings):
    """Festival results settings. Every field can be set as FESTIVAL_<NAME>."""

    # Hosted backend
    backend_url: str = Field(default="", description="Backend project URL")
    backend_key: str = Field(default="", description="Backend anon/service key")
    request_timeout: float = Field(default=30.0, description="HTTP timeout (seconds)")

    # Admin sign-in. An empty password refuses every login.
    admin_username: str = "admin"
    admin_password: str = ""
    admin_email: str = "admin@system.local"
    session_ttl_hours: int = Field(default=24, description="Admin session lifetime")

    # Public pages
    leaderboard_limit: int = Field(default=50, description="Entries shown on the leaderboard")
    default_template: str = "modern"

    # Read results from a JSON file instead of the backend
    results_file: Optional[str] = None

    log_level: str = "INFO"

    class Config:
        env_prefix = "FESTIVAL_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> FestivalSettings:
    return FestivalSettings()

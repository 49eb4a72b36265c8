"""Application configuration from environment."""
from pydantic_settings import BaseSettings

# Quiz defaults; services fall back to these when no Settings are passed
QUIZ_SIZE = 10
STAMP_THRESHOLD = 0.8  # 8/10 correct


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Meowtimedia Backend API"
    debug: bool = False
    environment: str = "development"  # development | production
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./meowtimedia.db"

    # Signs auth cookies and the OAuth state session
    secret_key: str = "change-me-in-production-use-env"

    # Auth cookie (session-based for logged-in users)
    auth_cookie_name: str = "meow_auth"
    auth_cookie_max_age: int = 60 * 60 * 24 * 30  # 30 days
    cookie_domain: str | None = None  # production only, e.g. ".example.com"

    # Frontend origin: CORS + post-login redirect
    client_url: str = "http://localhost:5000"

    # Google OAuth
    google_client_id: str | None = None
    google_client_secret: str | None = None
    google_callback_url: str | None = None

    # Owner allow-list (JSON list in env: OWNER_EMAILS='["me@example.com"]')
    owner_emails: list[str] = []

    # Quiz / stamps
    quiz_size: int = QUIZ_SIZE
    stamp_threshold: float = STAMP_THRESHOLD

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def google_oauth_enabled(self) -> bool:
        return bool(self.google_client_id and self.google_client_secret)


def get_settings() -> Settings:
    return Settings()

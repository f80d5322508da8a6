"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - Placeholder keys for third-party services: the app boots without them, calls fail loudly
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://showcase:showcase@db:5432/showcase"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosts provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 10
    database_max_overflow: int = 5

    # Public site (payment return URLs point here)
    public_site_url: str = "http://localhost:5173"

    # Auth provider — resolves bearer tokens to user ids
    auth_url: str = "http://localhost:54321/auth/v1"
    auth_api_key: str = "auth-placeholder"

    # Lygos (payment provider)
    lygos_api_key: str = "lygos-placeholder"
    lygos_base_url: str = "https://api.lygosapp.com/v1"
    payment_currency: str = "USD"

    # Resend (email delivery)
    resend_api_key: str = "re-placeholder"
    resend_base_url: str = "https://api.resend.com"
    email_sender_contact: str = "OREDY Contact Form <onboarding@resend.dev>"
    email_sender_brand: str = "OREDY Technologies <onboarding@resend.dev>"
    email_sender_marketplace: str = "Marketplace <onboarding@resend.dev>"
    owner_email: str = "oredymusanda@gmail.com"
    brand_name: str = "OREDY Technologies"
    email_signature_html: str = (
        "<strong>OREDY MUSANDA</strong><br>Développeur Frontend<br>OREDY Technologies"
    )
    email_footer: str = "contact@oredytech.com | +243 996 886 079"

    # Manual payment instructions relayed in purchase notifications
    payment_instructions: dict[str, str] = {
        "Airtel Money": "+243 996886079",
        "Orange Money": "+243 851006476",
    }
    payment_payee_name: str = "MUSANDA FABRICE / OREDY MUSANDA"

    # WordPress content API
    wordpress_base_url: str = "https://oredytech.com/wp-json/wp/v2"

    # Outbound HTTP
    http_timeout_seconds: float = 15.0

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

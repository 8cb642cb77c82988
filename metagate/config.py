"""metagate — Central Configuration via Pydantic Settings."""

from typing import Dict

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables / .env file.

    Built once at startup and handed to the client adapter and forwarders.
    """

    # ── Meta API ──
    meta_access_token: str = ""
    meta_page_access_token: str = ""
    meta_app_id: str = ""
    meta_app_secret: str = ""
    meta_api_version: str = "v18.0"
    meta_base_url: str = "https://graph.facebook.com"
    request_timeout: float = 30.0

    # ── Default resource identifiers ──
    meta_account_id: str = ""
    instagram_business_account_id: str = ""

    # ── Rate limiting ──
    rate_limit_window_ms: int = 15 * 60 * 1000
    rate_limit_max_requests: int = 100
    trust_forwarded_for: bool = False

    # ── App ──
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def graph_url(self) -> str:
        return f"{self.meta_base_url.rstrip('/')}/{self.meta_api_version}"

    @property
    def instagram_token(self) -> str:
        """Page token for Instagram calls, falling back to the main token."""
        return self.meta_page_access_token or self.meta_access_token

    @property
    def default_instagram_account_id(self) -> str:
        return self.instagram_business_account_id or self.meta_account_id

    def missing_credentials(self) -> list[str]:
        """Names of required variables that are not set."""
        required = {
            "META_ACCOUNT_ID": self.meta_account_id,
            "META_ACCESS_TOKEN": self.meta_access_token,
        }
        return [name for name, value in required.items() if not value]

    def credential_presence(self) -> Dict[str, bool]:
        """Which credentials are configured. Never exposes the values."""
        return {
            "meta_account_id": bool(self.meta_account_id),
            "meta_access_token": bool(self.meta_access_token),
            "meta_app_id": bool(self.meta_app_id),
            "meta_app_secret": bool(self.meta_app_secret),
            "meta_page_access_token": bool(self.meta_page_access_token),
            "instagram_business_account_id": bool(
                self.instagram_business_account_id
            ),
        }

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

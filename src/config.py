"""
Service configuration.

Values come from the environment (populated from .env.local / .env by
load_environment()). Settings is built once at startup and handed to the
Zendesk clients; nothing below reads os.environ at request time.

Environment variables:
- ZENDESK_SUBDOMAIN: Agent-side Zendesk account (ticket forms, requests)
- ZENDESK_EMAIL: API user email
- ZENDESK_API_TOKEN: API token for ZENDESK_EMAIL
- ZENDESK_B2B_SUBDOMAIN: Help center serving public articles (default: pdi-happibean-b2b)
- ZENDESK_HELP_CENTER_LOCALE: Help center locale (default: en-gb)
- ZENDESK_TIMEOUT: Upstream request timeout in seconds (default: 10)
- PORT: HTTP port (default: 4000)
- LOG_LEVEL: Console log level (default: INFO), read by src/main.py before logging setup
- LOG_FILE: Base log file path (default: logs/faq-search.log, empty disables file logging)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_HELP_CENTER_SUBDOMAIN = "pdi-happibean-b2b"


def load_environment(root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local (local dev) or .env (production) into os.environ.

    Returns:
        Path of the loaded file, or None if only system environment is used
    """
    env_local = root / ".env.local"
    env_file = root / ".env"

    # .env.local has highest priority, .env is the fallback
    for candidate in (env_local, env_file):
        if candidate.exists():
            load_dotenv(candidate, override=True)
            return candidate

    return None


@dataclass(frozen=True)
class Settings:
    zendesk_subdomain: Optional[str] = None
    zendesk_email: Optional[str] = None
    zendesk_api_token: Optional[str] = None
    help_center_subdomain: str = DEFAULT_HELP_CENTER_SUBDOMAIN
    help_center_locale: str = "en-gb"
    request_timeout: float = 10.0
    port: int = 4000

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables"""
        return cls(
            zendesk_subdomain=os.getenv("ZENDESK_SUBDOMAIN") or None,
            zendesk_email=os.getenv("ZENDESK_EMAIL") or None,
            zendesk_api_token=os.getenv("ZENDESK_API_TOKEN") or None,
            help_center_subdomain=os.getenv("ZENDESK_B2B_SUBDOMAIN") or DEFAULT_HELP_CENTER_SUBDOMAIN,
            help_center_locale=os.getenv("ZENDESK_HELP_CENTER_LOCALE", "en-gb"),
            request_timeout=float(os.getenv("ZENDESK_TIMEOUT", "10")),
            port=int(os.getenv("PORT", "4000")),
        )

    @property
    def zendesk_base_url(self) -> str:
        return f"https://{self.zendesk_subdomain}.zendesk.com"

    @property
    def help_center_url(self) -> str:
        """Base URL of the public help center API for the configured locale"""
        return f"https://{self.help_center_subdomain}.zendesk.com/api/v2/help_center/{self.help_center_locale}"

    @property
    def is_configured(self) -> bool:
        """Agent-side credentials present (required for ticket forms and requests)"""
        return bool(self.zendesk_subdomain and self.zendesk_api_token)

"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.infrastructure.logging.logger import get_app_logger


DEFAULT_PRICE_TIMEOUT_SECONDS = 8.0


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the identity provider and the price source.

    Attributes:
        supabase_project_url: Base URL of the Supabase project.
        supabase_jwt_secret: Shared secret used to verify access tokens.
        supabase_jwt_audience: Expected ``aud`` claim of access tokens.
        oauth_provider: OAuth provider used for sign in.
        price_relay_url: Optional relay wrapping quote requests.
        price_timeout_seconds: Upper bound for a single quote request.
    """

    supabase_project_url: str = ""
    supabase_jwt_secret: Optional[str] = None
    supabase_jwt_audience: str = "authenticated"
    oauth_provider: str = "google"
    price_relay_url: Optional[str] = None
    price_timeout_seconds: float = DEFAULT_PRICE_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        project_url = os.getenv("SUPABASE_PROJECT_URL", "").strip().rstrip("/")
        if not project_url:
            logger.warning("SUPABASE_PROJECT_URL is not set; sign in disabled.")
        relay = (os.getenv("PRICE_RELAY_URL") or "").strip() or None
        audience = os.getenv("SUPABASE_JWT_AUD", "authenticated").strip()
        provider = os.getenv("OAUTH_PROVIDER", "google").strip().lower()
        return cls(
            supabase_project_url=project_url,
            supabase_jwt_secret=os.getenv("SUPABASE_JWT_SECRET") or None,
            supabase_jwt_audience=audience,
            oauth_provider=provider,
            price_relay_url=relay,
            price_timeout_seconds=cls._parse_timeout(
                os.getenv("PRICE_TIMEOUT_SECONDS"),
                logger=logger,
            ),
        )

    @staticmethod
    def _parse_timeout(raw_value: str | None, logger) -> float:
        """Parse the quote timeout, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Positive timeout in seconds.
        """
        if not raw_value:
            return DEFAULT_PRICE_TIMEOUT_SECONDS
        try:
            value = float(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid PRICE_TIMEOUT_SECONDS '{raw_value}'. "
                f"Using {DEFAULT_PRICE_TIMEOUT_SECONDS}."
            )
            return DEFAULT_PRICE_TIMEOUT_SECONDS
        if value <= 0:
            logger.warning(
                "PRICE_TIMEOUT_SECONDS must be positive. "
                f"Using {DEFAULT_PRICE_TIMEOUT_SECONDS}."
            )
            return DEFAULT_PRICE_TIMEOUT_SECONDS
        return value


__all__ = ["DashboardSettings", "DEFAULT_PRICE_TIMEOUT_SECONDS"]

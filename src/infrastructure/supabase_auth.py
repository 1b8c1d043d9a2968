"""Supabase identity provider.

Sign in goes through Supabase's hosted OAuth flow. The access token it hands
back is verified locally with the project's JWT secret; the resulting
identity is published on the ``IdentityContext``. Log messages never carry
emails or tokens.
"""

from urllib.parse import urlencode

from jose import JWTError, jwt

from src.application.identity_context import IdentityContext
from src.application.ports.identity import IdentityProviderPort
from src.domain.models import Identity
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import DashboardSettings


class AuthenticationError(RuntimeError):
    """Raised when an access token cannot be trusted."""


class SupabaseIdentityProvider(IdentityProviderPort):
    """IdentityProviderPort backed by Supabase Auth."""

    def __init__(
        self,
        settings: DashboardSettings,
        identity_context: IdentityContext,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the provider.

        Args:
            settings: Supabase project URL, JWT secret and audience.
            identity_context: Context receiving sign in and sign out.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user actions.
        """
        self._settings = settings
        self._identity_context = identity_context
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def authorize_url(self, redirect_to: str) -> str:
        if not self._settings.supabase_project_url:
            raise RuntimeError("SUPABASE_PROJECT_URL is not configured")
        query = urlencode(
            {
                "provider": self._settings.oauth_provider,
                "redirect_to": redirect_to,
            }
        )
        return f"{self._settings.supabase_project_url}/auth/v1/authorize?{query}"

    def sign_in(self, access_token: str) -> Identity:
        """Verify ``access_token`` and make its user the current identity.

        Args:
            access_token: Supabase access token, with or without ``Bearer``.

        Returns:
            Identity: The signed-in user.

        Raises:
            AuthenticationError: If the token is missing, invalid or expired.
        """
        token = self._strip_bearer(access_token)
        claims = self.verify_token(token)

        user_id = claims.get("sub")
        if not user_id:
            raise AuthenticationError("Invalid auth token: missing subject")
        email = claims.get("email") or (
            claims.get("user_metadata") or {}
        ).get("email")

        identity = Identity(
            user_id=str(user_id),
            email=email,
            access_token=token,
        )
        self._identity_context.set(identity)
        self._usage_logger.info("User signed in")
        return identity

    def sign_out(self) -> None:
        if self._identity_context.current is None:
            return
        self._identity_context.clear()
        self._usage_logger.info("User signed out")

    def verify_token(self, token: str) -> dict:
        """Decode and validate a Supabase access token.

        Args:
            token: Raw JWT.

        Returns:
            dict: Verified claims.

        Raises:
            RuntimeError: If the JWT secret is not configured.
            AuthenticationError: If the token fails verification.
        """
        secret = self._settings.supabase_jwt_secret
        if not secret:
            raise RuntimeError("SUPABASE_JWT_SECRET is not configured")
        if not token:
            raise AuthenticationError("Missing access token")
        try:
            return jwt.decode(
                token,
                secret,
                algorithms=["HS256"],
                audience=self._settings.supabase_jwt_audience,
                issuer=f"{self._settings.supabase_project_url}/auth/v1",
            )
        except JWTError as exc:
            self._logger.warning(f"Rejected access token: {exc}")
            raise AuthenticationError(
                f"Invalid or expired token: {exc}"
            ) from exc

    @staticmethod
    def _strip_bearer(access_token: str | None) -> str:
        token = (access_token or "").strip()
        if token.lower().startswith("bearer "):
            return token.split(" ", 1)[1].strip()
        return token


__all__ = ["AuthenticationError", "SupabaseIdentityProvider"]

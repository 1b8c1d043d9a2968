"""Application port for the external identity provider."""

from typing import Protocol

from src.domain.models import Identity


class IdentityProviderPort(Protocol):
    """Port wrapping sign in and sign out against the auth provider."""

    def authorize_url(self, redirect_to: str) -> str:
        """Return the URL that starts the provider's OAuth sign-in."""

    def sign_in(self, access_token: str) -> Identity:
        """Verify an access token and publish the resulting identity."""

    def sign_out(self) -> None:
        """Forget the current identity."""


__all__ = ["IdentityProviderPort"]

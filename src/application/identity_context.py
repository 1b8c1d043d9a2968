"""Observable holder for the signed-in identity.

The dashboard reads the current identity from an ``IdentityContext`` that
is passed to whoever needs it. Interested parties subscribe to be told when
the user signs in, switches account, or signs out.
"""

from collections.abc import Callable

from src.domain.models import Identity
from src.infrastructure.logging.logger import get_app_logger


IdentityListener = Callable[[Identity | None], None]


class IdentityContext:
    """Current identity, or None, with change notification."""

    def __init__(
        self,
        identity: Identity | None = None,
        logger=None,
    ) -> None:
        """Initialize the context.

        Args:
            identity: Identity restored from a persisted session, if any.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._identity = identity
        self._listeners: list[IdentityListener] = []
        self._logger = logger or get_app_logger()

    @property
    def current(self) -> Identity | None:
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    def set(self, identity: Identity | None) -> None:
        """Replace the identity and notify listeners if the user changed.

        Args:
            identity: New identity, or None when signed out.
        """
        previous = self._identity
        self._identity = identity
        if _user_id(previous) == _user_id(identity):
            return
        self._notify(identity)

    def clear(self) -> None:
        """Sign the current identity out of the context."""
        self.set(None)

    def subscribe(self, listener: IdentityListener) -> Callable[[], None]:
        """Register a listener for identity changes.

        Args:
            listener: Called with the new identity (None on sign out).

        Returns:
            Callable[[], None]: Function removing the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, identity: Identity | None) -> None:
        for listener in list(self._listeners):
            try:
                listener(identity)
            except Exception as exc:
                self._logger.error(f"Identity listener failed: {exc}")


def _user_id(identity: Identity | None) -> str | None:
    return identity.user_id if identity is not None else None


__all__ = ["IdentityContext", "IdentityListener"]

"""Session state shared by the tool handlers, and the guard for protected tools."""
import asyncio
import logging
from typing import Callable, Optional, Protocol

from .identity import SignedInUser
from .outcome import Ok, Outcome, Unavailable
from .result import ToolResult

logger = logging.getLogger("weather_auth.session")

AUTH_REQUIRED_TEXT = "Authentication required. Please authenticate first using the 'authenticate' tool."


class IdentityBackend(Protocol):
    async def sign_in(self, email: str, password: str) -> Outcome: ...


class Session:
    """The process's single sign-in state.

    Starts unauthenticated. Only a successful :meth:`sign_in` changes it; a
    rejected or failed attempt leaves the current user in place. There is no
    sign-out.
    """

    def __init__(self, backend: IdentityBackend):
        self.backend = backend
        self._user: Optional[SignedInUser] = None
        self._lock = asyncio.Lock()
        self._observers: list[Callable[[SignedInUser], None]] = []

    @property
    def current_user(self) -> Optional[SignedInUser]:
        return self._user

    def is_authenticated(self) -> bool:
        return self._user is not None

    def observe(self, callback: Callable[[SignedInUser], None]) -> None:
        """Call ``callback`` with the new user whenever it changes."""
        self._observers.append(callback)

    async def sign_in(self, email: str, password: str) -> Outcome:
        """Attempt a sign-in through the identity backend.

        Returns the backend's outcome. A backend that raises is reported as
        ``Unavailable``, so every failure reaches the caller as a value.
        """
        async with self._lock:
            try:
                outcome = await self.backend.sign_in(email, password)
            except Exception as e:
                logger.exception(f"Identity backend raised during sign-in: {e}")
                return Unavailable(str(e) or "Unknown error")
            if isinstance(outcome, Ok):
                self._set_user(outcome.value)
            elif isinstance(outcome, Unavailable):
                logger.error(f"Sign-in for {email} failed: {outcome.reason}")
            return outcome

    def _set_user(self, user: SignedInUser) -> None:
        if user == self._user:
            return
        self._user = user
        for callback in self._observers:
            try:
                callback(user)
            except Exception:
                logger.exception("Session observer failed")


def require_auth(session: Session) -> Optional[ToolResult]:
    """Return the denial result when ``session`` is not signed in, else None."""
    if not session.is_authenticated():
        return ToolResult.text(AUTH_REQUIRED_TEXT)
    return None

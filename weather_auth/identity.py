"""Firebase Authentication adapter (email/password sign-in over the REST API)."""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .outcome import Denied, Ok, Outcome, Unavailable

logger = logging.getLogger("weather_auth.identity")

SIGN_IN_URL = "https://identitytoolkit.googleapis.com/v1/accounts:signInWithPassword"

# Error codes Firebase uses for a well-formed request with bad credentials.
# Some codes carry a suffix, e.g. "TOO_MANY_ATTEMPTS_TRY_LATER : ..." or
# "INVALID_PASSWORD : ...", so only the leading token is compared.
CREDENTIAL_ERRORS = frozenset({
    "EMAIL_NOT_FOUND",
    "INVALID_PASSWORD",
    "INVALID_LOGIN_CREDENTIALS",
    "INVALID_EMAIL",
    "MISSING_PASSWORD",
    "USER_DISABLED",
})


@dataclass(frozen=True)
class SignedInUser:
    uid: str
    email: str
    id_token: str = ""


class FirebaseIdentity:
    """Verifies email/password pairs against a Firebase project.

    ``sign_in`` returns an :class:`~weather_auth.outcome.Outcome`:
    ``Ok(SignedInUser)`` on success, ``Denied(code)`` when Firebase rejects the
    credentials and ``Unavailable(reason)`` for everything else (missing
    configuration, network errors, unexpected responses).
    """

    def __init__(self, api_key: Optional[str], timeout: float = 30.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    async def sign_in(self, email: str, password: str) -> Outcome:
        if not self.api_key:
            logger.error("[Firebase] FIREBASE_API_KEY is not set")
            return Unavailable("FIREBASE_API_KEY is not set")

        payload = {"email": email, "password": password, "returnSecureToken": True}
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    SIGN_IN_URL,
                    params={"key": self.api_key},
                    json=payload,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logger.exception(f"[Firebase] sign-in request failed: {e}")
            return Unavailable(f"Identity service unreachable: {e}")

        if response.status_code == 200:
            try:
                data = response.json()
                return Ok(SignedInUser(
                    uid=data["localId"],
                    email=data.get("email", email),
                    id_token=data.get("idToken", ""),
                ))
            except (ValueError, KeyError) as e:
                logger.exception(f"[Firebase] malformed sign-in response: {e}")
                return Unavailable("Identity service returned a malformed response")

        code = _error_code(response)
        if response.status_code == 400 and code in CREDENTIAL_ERRORS:
            logger.info(f"[Firebase] sign-in rejected for {email}: {code}")
            return Denied(code)

        logger.warning(f"[Firebase] sign-in failed with status {response.status_code}: {code}")
        return Unavailable(f"Identity service error ({response.status_code}): {code or 'no details'}")


def _error_code(response: httpx.Response) -> str:
    try:
        message = response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return ""
    return str(message).split(":", 1)[0].strip()

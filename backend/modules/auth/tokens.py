"""
Bearer token issuance and verification.

Tokens are HS256 JWTs carrying the user ID as ``sub`` plus ``iat`` and
``exp``. Nothing is stored server-side; verification is a pure function
of the token, the secret and the current time.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
import jwt

from shared.exceptions import ConfigurationError

from .exceptions import BadSignatureError, ExpiredTokenError, MalformedTokenError
from .models import TokenClaims

DEFAULT_EXPIRES_IN = timedelta(hours=100)
REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class TokenService:
    """
    Implementation of ITokenService using PyJWT.

    The clock is injectable so tests can mint tokens in the past.
    """

    def __init__(
        self,
        secret: str,
        expires_in: timedelta = DEFAULT_EXPIRES_IN,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret or not secret.strip():
            raise ConfigurationError(
                "JWT secret is not configured. Set the JWT_SECRET environment variable."
            )
        self._secret = secret
        self._expires_in = expires_in
        self._algorithm = algorithm
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def issue(self, subject: str) -> str:
        """Sign a token for the given user ID."""
        now = self._clock()
        payload = {
            "sub": subject,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode a token, check its signature and expiry.

        An expired token is reported as expired even if its signature is
        also wrong.
        """
        try:
            unverified = jwt.decode(
                token,
                options={"verify_signature": False, "verify_exp": False, "verify_iat": False},
            )
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Malformed authentication token: {e}")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidSignatureError:
            if self._is_expired(unverified):
                raise ExpiredTokenError()
            raise BadSignatureError()
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Malformed authentication token: {e}")

        try:
            return TokenClaims(**payload)
        except ValueError as e:
            raise MalformedTokenError(f"Malformed authentication token: {e}")

    def _is_expired(self, payload: dict) -> bool:
        exp = payload.get("exp")
        if not isinstance(exp, (int, float)):
            return False
        # Same boundary as PyJWT: expired once now reaches exp
        return exp <= self._clock().timestamp()

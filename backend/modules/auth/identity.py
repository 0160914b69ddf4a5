"""
Per-request identity resolution.

Turns a bearer token into a PublicProfile or a typed rejection. Each
request walks NO_TOKEN -> EXTRACTED -> VERIFIED -> RESOLVED and ends
ATTACHED, or REJECTED at whichever stage failed.
"""

import logging
from enum import Enum
from typing import Optional

from shared.exceptions import AccountsError
from modules.audit.service import AuditRecorder

from .exceptions import InvalidTokenError, MissingTokenError
from .interfaces import IAuthService
from .models import PublicProfile

logger = logging.getLogger(__name__)

SERVICE_TAG = "identity"


class IdentityState(str, Enum):
    """Stages of identity resolution for one request."""

    NO_TOKEN = "no_token"
    EXTRACTED = "extracted"
    VERIFIED = "verified"
    RESOLVED = "resolved"
    ATTACHED = "attached"
    REJECTED = "rejected"


class IdentityResolver:
    """
    Resolves the caller's identity from a bearer token.

    Token possession is not enough: the subject must still exist in the
    store when the request arrives.
    """

    def __init__(self, auth: IAuthService, audit: Optional[AuditRecorder] = None):
        self._auth = auth
        self._audit = audit

    async def resolve(self, token: Optional[str]) -> PublicProfile:
        """
        Resolve a bearer token to a public profile.

        Raises:
            MissingTokenError: No bearer token was presented
            InvalidTokenError: The token failed verification
            UserNotFoundError: The token's subject no longer exists
        """
        state = IdentityState.NO_TOKEN
        try:
            if not token:
                raise MissingTokenError()
            state = IdentityState.EXTRACTED

            profile = await self._auth.authenticate(token)
            state = IdentityState.RESOLVED
        except InvalidTokenError as e:
            self._reject(state, e)
            raise
        except AccountsError as e:
            # Anything past token verification failed on the subject lookup
            if state is IdentityState.EXTRACTED:
                state = IdentityState.VERIFIED
            self._reject(state, e)
            raise

        logger.debug("Identity %s attached to request", profile.id)
        return profile

    def _reject(self, state: IdentityState, error: AccountsError) -> None:
        logger.info(
            "Request %s after stage %s: %s",
            IdentityState.REJECTED.value,
            state.value,
            error.code,
        )
        if self._audit is not None:
            self._audit.emit(
                "auth.rejected",
                body={"stage": state.value, "reason": error.code},
                service=SERVICE_TAG,
                user_id=error.details.get("user_id"),
            )

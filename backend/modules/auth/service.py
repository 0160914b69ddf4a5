"""
Authentication service implementation.

Orchestrates signup and login over an explicitly supplied credential
store, password hasher and token service, and resolves authenticated
identities back into public profiles.
"""

import asyncio
import logging
from typing import Optional

from shared.background import BackgroundTasks
from shared.exceptions import UniqueViolationError
from modules.audit.service import AuditRecorder

from .interfaces import (
    IAuthService,
    IPasswordHasher,
    ITokenService,
    IUserRepository,
    IWelcomeNotifier,
)
from .models import LoginResponse, PublicProfile, to_public_profile
from .exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from .validation import validate_login, validate_signup

logger = logging.getLogger(__name__)

SERVICE_TAG = "auth"


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    All collaborators are passed in; nothing is looked up globally.
    The audit recorder and welcome notifier are optional.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: IPasswordHasher,
        tokens: ITokenService,
        audit: Optional[AuditRecorder] = None,
        notifier: Optional[IWelcomeNotifier] = None,
        tasks: Optional[BackgroundTasks] = None,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens
        self._audit = audit
        self._notifier = notifier
        self._tasks = tasks or BackgroundTasks()

    async def signup(self, name: str, email: str, password: str) -> PublicProfile:
        """
        Register a new user.

        The pre-check and the insert are separate store calls. If a
        concurrent signup wins the race, the store's unique constraint
        rejects the insert and it is reported the same way.
        """
        name, email, password = validate_signup(name, email, password)

        if await self._users.get_by_email(email) is not None:
            logger.info("Signup rejected: email already registered")
            raise DuplicateEmailError()

        # bcrypt blocks, so it runs in a worker thread
        password_hash = await asyncio.to_thread(self._hasher.hash, password)
        try:
            user = await self._users.create(name=name, email=email, password_hash=password_hash)
        except UniqueViolationError:
            logger.info("Signup rejected by store uniqueness constraint")
            raise DuplicateEmailError()

        logger.info("User %s signed up", user.id)
        self._emit("user.signup", user_id=user.id)

        if self._notifier is not None:
            self._tasks.spawn(
                self._send_welcome(user.id, user.email),
                name=f"welcome-email:{user.id}",
            )

        return to_public_profile(user)

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Verify credentials and issue a token.

        Unknown email and wrong password raise the same error.
        """
        email, password = validate_login(email, password)

        user = await self._users.get_by_email(email)
        if user is None or not await asyncio.to_thread(
            self._hasher.verify, password, user.password_hash
        ):
            logger.info("Login failed")
            self._emit("user.login_failed", body={"email": email})
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        logger.info("User %s logged in", user.id)
        self._emit("user.login", user_id=user.id)

        return LoginResponse(user=to_public_profile(user), token=token)

    async def get_profile(self, user_id: str) -> PublicProfile:
        """Get a user's public profile by ID."""
        user = await self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return to_public_profile(user)

    async def list_profiles(self) -> list[PublicProfile]:
        """Get every user's public profile."""
        users = await self._users.list_all()
        return [to_public_profile(user) for user in users]

    async def authenticate(self, token: str) -> PublicProfile:
        """Verify a bearer token and resolve its subject to a profile."""
        claims = self._tokens.verify(token)
        return await self.get_profile(claims.sub)

    async def _send_welcome(self, user_id: str, email: str) -> None:
        try:
            await self._notifier.send_welcome(email)
        except Exception as e:
            logger.warning("Error sending welcome email to user %s: %s", user_id, e)
            self._emit(
                "notification.welcome_failed",
                body={"error": type(e).__name__},
                user_id=user_id,
            )

    def _emit(self, action: str, **kwargs) -> None:
        if self._audit is not None:
            self._audit.emit(action, service=SERVICE_TAG, **kwargs)

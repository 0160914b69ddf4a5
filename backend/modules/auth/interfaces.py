"""
Authentication module interfaces.

The API layer and the identity middleware depend on these protocols, not
on the concrete implementations. This enables testing with mocks and
swapping the store without touching the service.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import LoginResponse, PublicProfile, TokenClaims, User


@runtime_checkable
class IUserRepository(Protocol):
    """
    Credential store contract.

    Implementations must enforce email uniqueness themselves and raise
    UniqueViolationError when a create would break it.
    """

    async def create(self, name: str, email: str, password_hash: str) -> User:
        """
        Persist a new user.

        Raises:
            UniqueViolationError: If the email is already taken
            StoreUnavailableError: If the store cannot be reached
        """
        ...

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with this ID, or None."""
        ...

    async def get_by_email(self, email: str) -> Optional[User]:
        """Return the user with this email, or None."""
        ...

    async def list_all(self) -> list[User]:
        """Return every stored user."""
        ...


@runtime_checkable
class IPasswordHasher(Protocol):
    """One-way salted password hashing."""

    def hash(self, raw: str) -> str:
        ...

    def verify(self, raw: str, digest: str) -> bool:
        """Return True if raw matches digest. Never raises on mismatch."""
        ...


@runtime_checkable
class ITokenService(Protocol):
    """Bearer token issuance and verification."""

    def issue(self, subject: str) -> str:
        ...

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            MalformedTokenError, BadSignatureError, ExpiredTokenError
        """
        ...


@runtime_checkable
class IWelcomeNotifier(Protocol):
    """Sends the best-effort welcome message after signup."""

    async def send_welcome(self, email: str) -> None:
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def signup(self, name: str, email: str, password: str) -> PublicProfile:
        """
        Register a new user.

        Raises:
            RequestValidationError: If the input violates a constraint
            DuplicateEmailError: If the email is already registered
        """
        ...

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Verify credentials and issue a token.

        Raises:
            InvalidCredentialsError: If the email or password is wrong
        """
        ...

    async def get_profile(self, user_id: str) -> PublicProfile:
        """
        Get a user's public profile by ID.

        Raises:
            UserNotFoundError: If no such user exists
        """
        ...

    async def list_profiles(self) -> list[PublicProfile]:
        """Get every user's public profile."""
        ...

    async def authenticate(self, token: str) -> PublicProfile:
        """
        Verify a bearer token and resolve its subject.

        Raises:
            InvalidTokenError: If the token fails verification
            UserNotFoundError: If the subject no longer exists
        """
        ...

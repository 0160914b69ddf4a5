"""
Service wiring for FastAPI.

ServiceContainer builds every service once, from settings passed in by
the app factory, and the app keeps it on ``app.state``. Route
dependencies read it from the request rather than from a global.

When we're ready to move storage elsewhere, only the container changes.
"""

from datetime import timedelta
from typing import Optional

from fastapi import Request

from shared.background import BackgroundTasks
from shared.config import Settings
from modules.audit.interfaces import IAuditSink
from modules.audit.service import AuditRecorder
from modules.auth.identity import IdentityResolver
from modules.auth.interfaces import IAuthService, IUserRepository, IWelcomeNotifier
from modules.auth.notifications import create_welcome_notifier
from modules.auth.passwords import BcryptPasswordHasher
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService


class ServiceContainer:
    """
    Container for all service instances.

    Everything is constructed eagerly in __init__, so bad configuration
    (such as a missing JWT secret) fails at startup, not on first use.
    Tests pass their own repositories and notifier.
    """

    def __init__(
        self,
        settings: Settings,
        users: Optional[IUserRepository] = None,
        audit_sink: Optional[IAuditSink] = None,
        notifier: Optional[IWelcomeNotifier] = None,
    ) -> None:
        self.settings = settings
        self.tasks = BackgroundTasks()

        if users is None or audit_sink is None:
            default_users, default_sink = _build_storage(settings)
            users = users or default_users
            audit_sink = audit_sink or default_sink
        self.users = users
        self.audit = AuditRecorder(audit_sink, self.tasks)

        self.tokens = TokenService(
            settings.jwt_secret,
            expires_in=timedelta(hours=settings.jwt_expires_in_hours),
            algorithm=settings.jwt_algorithm,
        )
        self.hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
        self.notifier = notifier if notifier is not None else create_welcome_notifier(settings)

        self.auth: IAuthService = AuthService(
            users=self.users,
            hasher=self.hasher,
            tokens=self.tokens,
            audit=self.audit,
            notifier=self.notifier,
            tasks=self.tasks,
        )
        self.identity = IdentityResolver(self.auth, self.audit)

    async def shutdown(self) -> None:
        """Let in-flight background work finish."""
        await self.tasks.drain()


def _build_storage(settings: Settings) -> tuple[IUserRepository, IAuditSink]:
    if settings.storage_backend == "supabase":
        from shared.database import create_supabase_client
        from modules.auth.repository import SupabaseUserRepository
        from modules.audit.repository import SupabaseAuditSink

        client = create_supabase_client(settings)
        return SupabaseUserRepository(client), SupabaseAuditSink(client)

    from modules.auth.repository import InMemoryUserRepository
    from modules.audit.repository import InMemoryAuditSink

    return InMemoryUserRepository(), InMemoryAuditSink()


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the app's service container."""
    return request.app.state.container


def get_auth_service(request: Request) -> IAuthService:
    """FastAPI dependency for auth service."""
    return get_container(request).auth


def get_identity_resolver(request: Request) -> IdentityResolver:
    """FastAPI dependency for the identity resolver."""
    return get_container(request).identity

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock

from shared.exceptions import StoreUnavailableError
from modules.auth.identity import IdentityResolver, IdentityState
from modules.auth.exceptions import (
    BadSignatureError,
    ExpiredTokenError,
    MalformedTokenError,
    MissingTokenError,
    UserNotFoundError,
)
from tests.conftest import create_test_token


class TestIdentityResolver:
    @pytest.fixture
    def resolver(self, auth_service, audit):
        return IdentityResolver(auth_service, audit)

    @pytest_asyncio.fixture
    async def user(self, users, hasher):
        return await users.create(name="John Doe", email="john@x.com", password_hash=hasher.hash("StrongP@1"))

    @pytest.mark.asyncio
    async def test_resolves_valid_token(self, resolver, tokens, user):
        """A valid token for an existing user should resolve to the profile."""
        profile = await resolver.resolve(tokens.issue(user.id))
        assert profile.id == user.id
        assert profile.email == "john@x.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, ""])
    async def test_missing_token(self, resolver, token):
        with pytest.raises(MissingTokenError):
            await resolver.resolve(token)

    @pytest.mark.asyncio
    async def test_expired_token(self, resolver, user):
        with pytest.raises(ExpiredTokenError):
            await resolver.resolve(create_test_token(user_id=user.id, expired=True))

    @pytest.mark.asyncio
    async def test_bad_signature(self, resolver, user):
        with pytest.raises(BadSignatureError):
            await resolver.resolve(create_test_token(user_id=user.id, secret="other"))

    @pytest.mark.asyncio
    async def test_malformed_token(self, resolver):
        with pytest.raises(MalformedTokenError):
            await resolver.resolve("garbage")

    @pytest.mark.asyncio
    async def test_user_gone(self, resolver, tokens):
        """A valid token whose subject no longer exists should be rejected."""
        with pytest.raises(UserNotFoundError):
            await resolver.resolve(tokens.issue("deleted-user"))

    @pytest.mark.asyncio
    async def test_delegates_to_auth_service(self, audit):
        """The resolver should authenticate through the auth service."""
        auth = AsyncMock()
        resolver = IdentityResolver(auth, audit)

        profile = await resolver.resolve("some-token")

        auth.authenticate.assert_awaited_once_with("some-token")
        assert profile is auth.authenticate.return_value

    @pytest.mark.asyncio
    async def test_rejections_are_audited(self, resolver, tokens, audit_sink, tasks):
        """Each rejection should record the stage reached and the reason."""
        with pytest.raises(MissingTokenError):
            await resolver.resolve(None)
        with pytest.raises(BadSignatureError):
            await resolver.resolve(create_test_token(secret="other"))
        with pytest.raises(UserNotFoundError):
            await resolver.resolve(tokens.issue("deleted-user"))
        await tasks.drain()

        events = list(reversed(await audit_sink.list_events()))
        assert [e.action for e in events] == ["auth.rejected"] * 3
        assert [e.body for e in events] == [
            {"stage": IdentityState.NO_TOKEN.value, "reason": "MISSING_TOKEN"},
            {"stage": IdentityState.EXTRACTED.value, "reason": "BAD_SIGNATURE"},
            {"stage": IdentityState.VERIFIED.value, "reason": "USER_NOT_FOUND"},
        ]
        assert events[2].user_id == "deleted-user"

    @pytest.mark.asyncio
    async def test_store_failure_after_verification(self, audit, audit_sink, tasks):
        """A store outage during lookup should propagate and be audited as VERIFIED."""
        auth = AsyncMock()
        auth.authenticate.side_effect = StoreUnavailableError("supabase", "down")
        resolver = IdentityResolver(auth, audit)

        with pytest.raises(StoreUnavailableError):
            await resolver.resolve("some-token")
        await tasks.drain()

        events = await audit_sink.list_events()
        assert events[0].body == {"stage": IdentityState.VERIFIED.value, "reason": "STORE_UNAVAILABLE"}

    @pytest.mark.asyncio
    async def test_success_is_not_audited(self, resolver, tokens, user, audit_sink, tasks):
        await resolver.resolve(tokens.issue(user.id))
        await tasks.drain()
        assert await audit_sink.list_events() == []

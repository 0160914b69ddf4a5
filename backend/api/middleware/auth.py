"""
Bearer authentication dependency.

Runs the identity resolver for protected routes. Rejections surface as
the auth module's typed exceptions, which the app's error handlers turn
into 401 (token problems) or 404 (user gone) responses before the route
body runs.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from modules.auth.identity import IdentityResolver, IdentityState
from modules.auth.models import PublicProfile

from ..dependencies import get_identity_resolver

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> PublicProfile:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. The resolved
    profile is also attached to ``request.state.user``.

    Usage:
        @router.get("/protected")
        async def protected_route(user: PublicProfile = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = credentials.credentials if credentials else None
    user = await resolver.resolve(token)
    request.state.user = user
    logger.debug("Request identity %s: %s", IdentityState.ATTACHED.value, user.id)
    return user

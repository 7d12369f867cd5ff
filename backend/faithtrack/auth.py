"""
Faithtrack Backend: Caller Identity Resolution
================================================

What:  FastAPI dependency that turns the request's bearer token into an
       optional caller id.
How:   Verifies the JWT issued by the identity provider with python-jose
       (signature, expiry, optional issuer) and returns its `sub` claim.
Who:   Injected into every route; the result is passed to services as an
       explicit argument.

Anonymous Callers:
    A missing, malformed, expired or wrongly signed token resolves to None.
    Read operations then return empty results and mutating operations raise
    UnauthenticatedError inside the service layer, so the outcome for a bad
    token is the same as for no token at all.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from faithtrack.config import settings

logger = logging.getLogger(__name__)

# auto_error=False: a missing header is an anonymous caller, not a 403
bearer_scheme = HTTPBearer(auto_error=False)


def resolve_caller_id(token: Optional[str]) -> Optional[str]:
    """
    Resolve a bearer token to the caller's stable user id.

    Returns:
        The token's `sub` claim, or None when the token is absent or invalid.
    """
    if not token or not settings.auth_secret_key:
        return None

    try:
        claims = jwt.decode(
            token,
            settings.auth_secret_key,
            algorithms=[settings.auth_algorithm],
            issuer=settings.auth_issuer,
            options={"verify_aud": False},
        )
    except JWTError as e:
        logger.info("Rejected bearer token: %s", type(e).__name__)
        return None

    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject:
        logger.info("Rejected bearer token without a subject claim")
        return None
    return subject


async def get_caller_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """FastAPI dependency: the current caller's id, or None for anonymous requests."""
    if credentials is None:
        return None
    return resolve_caller_id(credentials.credentials)

"""Identity dependencies.

Tokens are issued by the external identity provider and signed with the
shared secret from settings. A browser sends its token in the
``access_token`` cookie; API clients may use a bearer header instead. The
user's email is the identifier stored as Producer.owner_id.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from food_registration.core.exceptions import NotAuthenticatedError
from food_registration.core.security import CurrentUser, decode_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

TOKEN_COOKIE = "access_token"


def _extract_token(
    request: Request, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    if credentials:
        return credentials.credentials
    return request.cookies.get(TOKEN_COOKIE)


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> CurrentUser:
    """Validate the caller's token and return the user it identifies."""
    token = _extract_token(request, credentials)
    if not token:
        raise NotAuthenticatedError()

    try:
        payload = decode_token(token)
    except JWTError as e:
        logger.info(f"Rejected token: {e}")
        raise NotAuthenticatedError("Could not validate credentials") from None

    email: str | None = payload.get("email") or payload.get("sub")
    if not email:
        raise NotAuthenticatedError("Invalid authentication token")

    return CurrentUser(email=email, subject=payload.get("sub"))


async def get_current_user_optional(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> CurrentUser | None:
    """Get current user if authenticated, None otherwise."""
    try:
        return await get_current_user(request, credentials)
    except NotAuthenticatedError:
        return None


# Type aliases for cleaner dependency injection
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
OptionalUser = Annotated[CurrentUser | None, Depends(get_current_user_optional)]

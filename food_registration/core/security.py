from dataclasses import dataclass
from typing import Any

from jose import jwt

from food_registration.config import settings


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller. The email is the owner identifier on producers."""

    email: str
    subject: str | None = None


def decode_token(token: str) -> dict[str, Any]:
    """Verify a token's signature and audience and return its claims."""
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        audience=settings.jwt_audience,
    )


def create_access_token(email: str, subject: str | None = None, **claims: Any) -> str:
    """Sign a token the way the identity provider does (local development and tests)."""
    payload = {"email": email, "sub": subject or email, "aud": settings.jwt_audience, **claims}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

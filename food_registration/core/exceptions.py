from fastapi import HTTPException, status


class NotAuthenticatedError(HTTPException):
    """Raised when an owner-only action is requested without an identity."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ImageValidationError(ValueError):
    """Raised when an uploaded image is rejected (type or size)."""

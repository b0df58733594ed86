"""API dependencies - re-exports from submodules."""

from .auth import (
    AuthenticatedUser,
    OptionalUser,
    get_current_user,
    get_current_user_optional,
    security,
)
from .controllers import (
    get_producer_controller,
    get_producer_repository,
    get_product_controller,
    get_product_repository,
)

__all__ = [
    # Auth
    "security",
    "get_current_user",
    "get_current_user_optional",
    "AuthenticatedUser",
    "OptionalUser",
    # Controllers
    "get_product_repository",
    "get_producer_repository",
    "get_product_controller",
    "get_producer_controller",
]

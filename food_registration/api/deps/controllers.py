"""Per-request construction of repositories and controllers."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from food_registration.controllers.producer_controller import ProducerController
from food_registration.controllers.product_controller import ProductController
from food_registration.core.database import get_db
from food_registration.core.security import CurrentUser
from food_registration.domain.producer_repository import ProducerRepository
from food_registration.domain.product_repository import ProductRepository
from food_registration.services.image_storage import ImageStorage, get_image_storage

from .auth import get_current_user_optional


def get_product_repository(db: AsyncSession = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


def get_producer_repository(db: AsyncSession = Depends(get_db)) -> ProducerRepository:
    return ProducerRepository(db)


def get_product_controller(
    request: Request,
    products: ProductRepository = Depends(get_product_repository),
    producers: ProducerRepository = Depends(get_producer_repository),
    images: ImageStorage = Depends(get_image_storage),
    current_user: CurrentUser | None = Depends(get_current_user_optional),
) -> ProductController:
    return ProductController(products, producers, images, request, current_user)


def get_producer_controller(
    request: Request,
    producers: ProducerRepository = Depends(get_producer_repository),
    products: ProductRepository = Depends(get_product_repository),
    images: ImageStorage = Depends(get_image_storage),
    current_user: CurrentUser | None = Depends(get_current_user_optional),
) -> ProducerController:
    return ProducerController(producers, products, images, request, current_user)

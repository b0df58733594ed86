from food_registration.domain.producer_repository import ProducerRepository
from food_registration.domain.product_repository import ProductRepository

__all__ = [
    "ProducerRepository",
    "ProductRepository",
]

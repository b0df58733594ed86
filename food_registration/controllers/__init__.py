from food_registration.controllers.producer_controller import ProducerController
from food_registration.controllers.product_controller import ProductController

__all__ = [
    "ProducerController",
    "ProductController",
]

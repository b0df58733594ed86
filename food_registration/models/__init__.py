from food_registration.models.producer import Producer, ProducerBase, ProducerForm
from food_registration.models.product import (
    NUTRITION_SCORES,
    PRODUCT_CATEGORIES,
    Product,
    ProductBase,
    ProductForm,
)

__all__ = [
    "NUTRITION_SCORES",
    "PRODUCT_CATEGORIES",
    "Producer",
    "ProducerBase",
    "ProducerForm",
    "Product",
    "ProductBase",
    "ProductForm",
]

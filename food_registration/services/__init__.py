from food_registration.services.image_storage import ImageStorage, get_image_storage

__all__ = [
    "ImageStorage",
    "get_image_storage",
]

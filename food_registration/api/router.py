from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from food_registration.api import producers, products

page_router = APIRouter()

page_router.include_router(products.router)
page_router.include_router(producers.router)


@page_router.get("/", include_in_schema=False)
async def home() -> RedirectResponse:
    return RedirectResponse("/products")

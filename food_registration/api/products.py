"""Product routes: thin adapters from HTTP to ProductController actions."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from food_registration.api.deps import get_current_user, get_product_controller
from food_registration.api.forms import read_form
from food_registration.controllers.product_controller import ProductController

router = APIRouter(prefix="/products", tags=["products"], default_response_class=HTMLResponse)

owner_only = [Depends(get_current_user)]


@router.get("")
async def index(
    name: str | None = None,
    category: str | None = None,
    controller: ProductController = Depends(get_product_controller),
) -> Response:
    """List products, optionally filtered by name substring and category."""
    return await controller.index(name, category)


@router.get("/table", dependencies=owner_only)
async def table(controller: ProductController = Depends(get_product_controller)) -> Response:
    """The current user's products."""
    return await controller.table()


@router.get("/create", dependencies=owner_only)
async def create(controller: ProductController = Depends(get_product_controller)) -> Response:
    return await controller.create()


@router.post("/create", dependencies=owner_only)
async def create_post(
    request: Request,
    controller: ProductController = Depends(get_product_controller),
) -> Response:
    data, image = await read_form(request)
    return await controller.create_post(data, image)


@router.get("/{product_id}")
async def details(
    product_id: int,
    controller: ProductController = Depends(get_product_controller),
) -> Response:
    return await controller.details(product_id)


@router.get("/{product_id}/update", dependencies=owner_only)
async def update(
    product_id: int,
    controller: ProductController = Depends(get_product_controller),
) -> Response:
    return await controller.update(product_id)


@router.post("/{product_id}/update", dependencies=owner_only)
async def update_post(
    product_id: int,
    request: Request,
    controller: ProductController = Depends(get_product_controller),
) -> Response:
    data, image = await read_form(request)
    return await controller.update_post(product_id, data, image)


@router.get("/{product_id}/delete", dependencies=owner_only)
async def delete_confirm(
    product_id: int,
    controller: ProductController = Depends(get_product_controller),
) -> Response:
    return await controller.delete_confirm(product_id)


@router.post("/{product_id}/delete", dependencies=owner_only)
async def delete(
    product_id: int,
    controller: ProductController = Depends(get_product_controller),
) -> Response:
    return await controller.delete(product_id)

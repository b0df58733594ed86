"""Producer routes. All of them require an authenticated owner."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from food_registration.api.deps import get_current_user, get_producer_controller
from food_registration.api.forms import read_form
from food_registration.controllers.producer_controller import ProducerController

router = APIRouter(
    prefix="/producers",
    tags=["producers"],
    default_response_class=HTMLResponse,
    dependencies=[Depends(get_current_user)],
)


@router.get("")
async def index(controller: ProducerController = Depends(get_producer_controller)) -> Response:
    return await controller.index()


@router.get("/create")
async def create(controller: ProducerController = Depends(get_producer_controller)) -> Response:
    return await controller.create()


@router.post("/create")
async def create_post(
    request: Request,
    controller: ProducerController = Depends(get_producer_controller),
) -> Response:
    data, image = await read_form(request)
    return await controller.create_post(data, image)


@router.get("/{producer_id}/update")
async def update(
    producer_id: int,
    controller: ProducerController = Depends(get_producer_controller),
) -> Response:
    return await controller.update(producer_id)


@router.post("/{producer_id}/update")
async def update_post(
    producer_id: int,
    request: Request,
    controller: ProducerController = Depends(get_producer_controller),
) -> Response:
    data, image = await read_form(request)
    return await controller.update_post(producer_id, data, image)


@router.get("/{producer_id}/delete")
async def delete_confirm(
    producer_id: int,
    controller: ProducerController = Depends(get_producer_controller),
) -> Response:
    return await controller.delete_confirm(producer_id)


@router.post("/{producer_id}/delete")
async def delete(
    producer_id: int,
    controller: ProducerController = Depends(get_producer_controller),
) -> Response:
    return await controller.delete(producer_id)

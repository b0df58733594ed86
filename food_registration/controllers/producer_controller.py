"""Producer pages. Every action is scoped to producers the caller owns."""

import logging
from collections.abc import Mapping
from typing import Any

from fastapi.responses import Response
from starlette.datastructures import UploadFile
from starlette.requests import Request

from food_registration.controllers.base import Controller
from food_registration.core.exceptions import ImageValidationError
from food_registration.core.security import CurrentUser
from food_registration.domain.producer_repository import ProducerRepository
from food_registration.domain.product_repository import ProductRepository
from food_registration.models.producer import Producer, ProducerForm
from food_registration.services.image_storage import ImageStorage, has_upload

logger = logging.getLogger(__name__)

INDEX_URL = "/producers"


class ProducerController(Controller):
    """Handles producer requests on behalf of the current user."""

    def __init__(
        self,
        producer_repository: ProducerRepository,
        product_repository: ProductRepository,
        image_storage: ImageStorage,
        request: Request,
        current_user: CurrentUser | None = None,
    ):
        super().__init__(request, current_user)
        self.producers = producer_repository
        self.products = product_repository
        self.images = image_storage

    async def index(self) -> Response:
        if not self.user_id:
            return self.forbidden()
        producers = await self.producers.get_producers_by_owner(self.user_id)
        return self.view("producers/index.html", {"producers": producers})

    async def create(self) -> Response:
        return self.view("producers/create.html", {"values": {}})

    async def create_post(
        self, data: Mapping[str, Any], image: UploadFile | None = None
    ) -> Response:
        if not self.user_id:
            return self.forbidden()

        form = self.bind(ProducerForm, data)
        if form is None:
            return self.view("producers/create.html", {"values": _form_values(data)})

        producer = Producer(**form.model_dump(), owner_id=self.user_id)
        if has_upload(image):
            try:
                producer.image_url = await self.images.save(image)  # type: ignore[arg-type]
            except ImageValidationError as e:
                self.model_state.add_error("image", str(e))
                return self.view("producers/create.html", {"values": _form_values(data)})

        try:
            await self.producers.create_producer(producer)
        except Exception:
            await self.images.delete(producer.image_url)
            raise
        logger.info(f"Producer '{producer.name}' created for {self.user_id}")
        self.flash("Producer created successfully")
        return self.redirect(INDEX_URL)

    async def update(self, producer_id: int) -> Response:
        producer = await self.producers.get_producer_by_id(producer_id)
        if producer is None:
            return self.not_found()
        if not producer.is_owned_by(self.user_id):
            return self.forbidden()
        return self.view(
            "producers/update.html",
            {"producer": producer, "values": producer.model_dump()},
        )

    async def update_post(
        self,
        producer_id: int,
        data: Mapping[str, Any],
        image: UploadFile | None = None,
    ) -> Response:
        producer = await self.producers.get_producer_by_id(producer_id)
        if producer is None:
            return self.not_found()
        if not producer.is_owned_by(self.user_id):
            logger.warning(f"Update rejected: {self.user_id} does not own producer {producer_id}")
            return self.forbidden()

        form = self.bind(ProducerForm, data)
        if form is None:
            return self.view(
                "producers/update.html",
                {"producer": producer, "values": _form_values(data)},
            )

        new_image = None
        if has_upload(image):
            try:
                new_image = await self.images.save(image)  # type: ignore[arg-type]
            except ImageValidationError as e:
                self.model_state.add_error("image", str(e))
                return self.view(
                    "producers/update.html",
                    {"producer": producer, "values": _form_values(data)},
                )

        old_image = producer.image_url
        for field, value in form.model_dump().items():
            setattr(producer, field, value)
        if new_image:
            producer.image_url = new_image
        try:
            await self.producers.update_producer(producer)
        except Exception:
            await self.images.delete(new_image)
            raise

        if new_image:
            await self.images.delete(old_image)
        logger.info(f"Producer {producer_id} updated")
        self.flash("Producer updated successfully")
        return self.redirect(INDEX_URL)

    async def delete_confirm(self, producer_id: int) -> Response:
        producer = await self.producers.get_producer_by_id(producer_id)
        if producer is None:
            return self.not_found()
        if not producer.is_owned_by(self.user_id):
            return self.forbidden()
        product_count = await self.products.count_by_producer(producer_id)
        return self.view(
            "producers/delete.html",
            {"producer": producer, "product_count": product_count},
        )

    async def delete(self, producer_id: int) -> Response:
        producer = await self.producers.get_producer_by_id(producer_id)
        if producer is None:
            return self.not_found()
        if not producer.is_owned_by(self.user_id):
            logger.warning(f"Delete rejected: {self.user_id} does not own producer {producer_id}")
            return self.forbidden()

        if await self.products.count_by_producer(producer_id):
            self.flash("Delete this producer's products first", "error")
            return self.redirect(INDEX_URL)

        await self.producers.delete_producer(producer_id)
        await self.images.delete(producer.image_url)
        logger.info(f"Producer {producer_id} deleted")
        self.flash("Producer deleted successfully")
        return self.redirect(INDEX_URL)


def _form_values(data: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if k != "image"}

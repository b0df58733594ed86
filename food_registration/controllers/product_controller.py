"""Product pages: public listing and details, owner-only create/update/delete."""

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
from food_registration.models.producer import Producer
from food_registration.models.product import (
    NUTRITION_SCORES,
    PRODUCT_CATEGORIES,
    Product,
    ProductForm,
)
from food_registration.services.image_storage import ImageStorage, has_upload

logger = logging.getLogger(__name__)

TABLE_URL = "/products/table"


class ProductController(Controller):
    """Handles product requests on behalf of the current user."""

    def __init__(
        self,
        product_repository: ProductRepository,
        producer_repository: ProducerRepository,
        image_storage: ImageStorage,
        request: Request,
        current_user: CurrentUser | None = None,
    ):
        super().__init__(request, current_user)
        self.products = product_repository
        self.producers = producer_repository
        self.images = image_storage

    # ─────────────────────────────────────────────────────────────────────
    # Listing
    # ─────────────────────────────────────────────────────────────────────

    async def index(self, name: str | None = None, category: str | None = None) -> Response:
        products = await self.products.get_filtered_products(name, category)
        return self.view(
            "products/index.html",
            {
                "products": products,
                "categories": PRODUCT_CATEGORIES,
                "name": name or "",
                "category": category or "",
            },
        )

    async def table(self) -> Response:
        """The current user's products, with edit and delete links."""
        if not self.user_id:
            return self.forbidden()
        products = await self.products.get_products_by_owner(self.user_id)
        return self.view("products/table.html", {"products": products})

    async def details(self, product_id: int) -> Response:
        product = await self.products.get_product_by_id(product_id)
        if product is None:
            return self.not_found()
        return self.view(
            "products/details.html",
            {"product": product, "can_edit": self._owns(product.producer)},
        )

    # ─────────────────────────────────────────────────────────────────────
    # Create
    # ─────────────────────────────────────────────────────────────────────

    async def create(self) -> Response:
        return await self._form_view("products/create.html", values={})

    async def create_post(
        self, data: Mapping[str, Any], image: UploadFile | None = None
    ) -> Response:
        form = self.bind(ProductForm, data)
        if form is None:
            return await self._form_view("products/create.html", values=data)

        producer = await self.producers.get_producer_by_id(form.producer_id)
        if producer is None:
            logger.warning(f"Create rejected: producer {form.producer_id} not found")
            self.flash("Producer not found", "error")
            return self.redirect("/products/create")

        if not producer.is_owned_by(self.user_id):
            logger.warning(
                f"Create rejected: {self.user_id} does not own producer {producer.producer_id}"
            )
            return self.forbidden()

        product = Product(**form.model_dump())
        if has_upload(image):
            try:
                product.image_url = await self.images.save(image)  # type: ignore[arg-type]
            except ImageValidationError as e:
                self.model_state.add_error("image", str(e))
                return await self._form_view("products/create.html", values=data)

        try:
            await self.products.create_product(product)
        except Exception:
            await self.images.delete(product.image_url)
            raise
        logger.info(f"Product '{product.name}' created under producer {producer.producer_id}")
        self.flash("Product created successfully")
        return self.redirect(TABLE_URL)

    # ─────────────────────────────────────────────────────────────────────
    # Update
    # ─────────────────────────────────────────────────────────────────────

    async def update(self, product_id: int) -> Response:
        product = await self.products.get_product_by_id(product_id)
        if product is None:
            return self.bad_request("Product not found")
        if not self._owns(product.producer):
            return self.forbidden()

        return await self._form_view(
            "products/update.html",
            values=product.model_dump(),
            product=product,
        )

    async def update_post(
        self,
        product_id: int,
        data: Mapping[str, Any],
        image: UploadFile | None = None,
    ) -> Response:
        product = await self.products.get_product_by_id(product_id)
        if product is None:
            return self.bad_request("Product not found")
        if not self._owns(product.producer):
            return self.forbidden()

        form = self.bind(ProductForm, data)
        if form is None:
            return await self._form_view("products/update.html", values=data, product=product)

        if form.producer_id != product.producer_id:
            target = await self.producers.get_producer_by_id(form.producer_id)
            if target is None:
                self.flash("Producer not found", "error")
                return self.redirect(f"/products/{product_id}/update")
            if not target.is_owned_by(self.user_id):
                logger.warning(
                    f"Update rejected: {self.user_id} does not own producer {target.producer_id}"
                )
                return self.forbidden()

        new_image = None
        if has_upload(image):
            try:
                new_image = await self.images.save(image)  # type: ignore[arg-type]
            except ImageValidationError as e:
                self.model_state.add_error("image", str(e))
                return await self._form_view(
                    "products/update.html", values=data, product=product
                )

        old_image = product.image_url
        for field, value in form.model_dump().items():
            setattr(product, field, value)
        if new_image:
            product.image_url = new_image
        try:
            await self.products.update_product(product)
        except Exception:
            await self.images.delete(new_image)
            raise

        # The old file goes only once the row points at its replacement
        if new_image:
            await self.images.delete(old_image)
        logger.info(f"Product {product_id} updated")
        self.flash("Product updated successfully")
        return self.redirect(TABLE_URL)

    # ─────────────────────────────────────────────────────────────────────
    # Delete
    # ─────────────────────────────────────────────────────────────────────

    async def delete_confirm(self, product_id: int) -> Response:
        product = await self.products.get_product_by_id(product_id)
        if product is None:
            return self.not_found()
        if not self._owns(product.producer):
            return self.forbidden()
        return self.view("products/delete.html", {"product": product})

    async def delete(self, product_id: int) -> Response:
        product = await self.products.get_product_by_id(product_id)
        if product is None:
            return self.not_found()
        if not self._owns(product.producer):
            logger.warning(f"Delete rejected: {self.user_id} does not own product {product_id}")
            return self.forbidden()

        await self.products.delete_product(product_id)
        await self.images.delete(product.image_url)
        logger.info(f"Product {product_id} deleted")
        self.flash("Product deleted successfully")
        return self.redirect(TABLE_URL)

    # ─────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────

    def _owns(self, producer: Producer | None) -> bool:
        return producer is not None and producer.is_owned_by(self.user_id)

    async def _producer_options(self) -> list[tuple[str, str]]:
        """Producers the caller may register products under, as (value, label) pairs."""
        producers = await self.producers.get_all_producers()
        if self.user_id:
            producers = [p for p in producers if p.is_owned_by(self.user_id)]
        return [(str(p.producer_id), p.name) for p in producers]

    async def _form_view(
        self,
        template: str,
        values: Mapping[str, Any],
        product: Product | None = None,
    ) -> Response:
        return self.view(
            template,
            {
                "producers": await self._producer_options(),
                "categories": PRODUCT_CATEGORIES,
                "scores": NUTRITION_SCORES,
                "values": {k: v for k, v in values.items() if k != "image"},
                "product": product,
            },
        )

"""Product page endpoint tests.

Drives the real FastAPI routes, middleware and templates with the
repositories mocked and images written to a temporary web root.
"""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from tests.helpers.mock_factories import make_producer, make_product

OWNER_EMAIL = "test@test.com"


@pytest.mark.asyncio
async def test_index_filters_by_name_and_category(api_client: AsyncClient, product_repo):
    """GET /products passes both filters to the repository."""
    product_repo.get_filtered_products.return_value = [
        make_product(make_producer(), name="Apple", category="Fruits")
    ]

    resp = await api_client.get("/products", params={"name": "Apple", "category": "Fruits"})

    assert resp.status_code == 200
    assert "Apple" in resp.text
    product_repo.get_filtered_products.assert_awaited_once_with("Apple", "Fruits")


@pytest.mark.asyncio
async def test_index_is_public(anonymous_client: AsyncClient, product_repo):
    product_repo.get_filtered_products.return_value = []

    resp = await anonymous_client.get("/products")

    assert resp.status_code == 200
    assert "No products found." in resp.text


@pytest.mark.asyncio
async def test_root_redirects_to_products(anonymous_client: AsyncClient):
    resp = await anonymous_client.get("/")

    assert resp.status_code == 307
    assert resp.headers["location"] == "/products"


@pytest.mark.asyncio
async def test_create_requires_authentication(anonymous_client: AsyncClient, product_repo):
    """POST /products/create without a token is rejected before any work."""
    resp = await anonymous_client.post("/products/create", data={"name": "Apple"})

    assert resp.status_code == 401
    product_repo.create_product.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_form_lists_own_producers(api_client: AsyncClient, producer_repo):
    producer_repo.get_all_producers.return_value = [
        make_producer(producer_id=1, name="Green Farm", owner_id=OWNER_EMAIL),
        make_producer(producer_id=2, name="Not Mine", owner_id="other@test.com"),
    ]

    resp = await api_client.get("/products/create")

    assert resp.status_code == 200
    assert "Green Farm" in resp.text
    assert "Not Mine" not in resp.text


@pytest.mark.asyncio
async def test_create_with_image_redirects_and_flashes(
    api_client: AsyncClient, product_repo, producer_repo, image_storage
):
    """A valid multipart submission stores the image, creates the product and redirects."""
    producer_repo.get_producer_by_id.return_value = make_producer(owner_id=OWNER_EMAIL)

    resp = await api_client.post(
        "/products/create",
        data={"name": "Apple", "producer_id": "1", "category": "Fruits", "nutrition_score": "a"},
        files={"image": ("apple.png", b"png-bytes", "image/png")},
    )

    assert resp.status_code == 303
    assert resp.headers["location"] == "/products/table"
    created = product_repo.create_product.await_args.args[0]
    assert created.nutrition_score == "A"
    assert created.image_url.startswith("/images/")
    stored = image_storage.directory / created.image_url.rsplit("/", 1)[1]
    assert stored.read_bytes() == b"png-bytes"

    product_repo.get_products_by_owner.return_value = [created]
    follow = await api_client.get("/products/table")
    assert "Product created successfully" in follow.text


@pytest.mark.asyncio
async def test_create_invalid_form_rerenders(api_client: AsyncClient, product_repo, producer_repo):
    producer_repo.get_all_producers.return_value = []

    resp = await api_client.post("/products/create", data={"name": "", "producer_id": ""})

    assert resp.status_code == 200
    assert "Producer is required" in resp.text
    product_repo.create_product.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_missing_product_returns_400(api_client: AsyncClient, product_repo):
    product_repo.get_product_by_id.return_value = None

    resp = await api_client.get("/products/999/update")

    assert resp.status_code == 400
    assert resp.text == "Product not found"


@pytest.mark.asyncio
async def test_delete_missing_product_returns_404(api_client: AsyncClient, product_repo):
    product_repo.get_product_by_id.return_value = None

    resp = await api_client.post("/products/999/delete")

    assert resp.status_code == 404
    product_repo.delete_product.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_foreign_product_returns_403(api_client: AsyncClient, product_repo):
    product_repo.get_product_by_id.return_value = make_product(
        make_producer(owner_id="other@test.com")
    )

    resp = await api_client.post("/products/1/delete")

    assert resp.status_code == 403
    product_repo.delete_product.assert_not_awaited()


@pytest.mark.asyncio
async def test_bearer_header_is_accepted(anonymous_client: AsyncClient, product_repo):
    from food_registration.core.security import create_access_token

    product_repo.get_products_by_owner.return_value = []

    resp = await anonymous_client.get(
        "/products/table",
        headers={"Authorization": f"Bearer {create_access_token(OWNER_EMAIL)}"},
    )

    assert resp.status_code == 200
    product_repo.get_products_by_owner.assert_awaited_once_with(OWNER_EMAIL)


@pytest.mark.asyncio
async def test_health(anonymous_client: AsyncClient):
    resp = await anonymous_client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}

"""Root conftest — test infrastructure for all backend tests.

Provides:
- In-memory SQLite db_session fixture (integration tests)
- Seeded producer and product fixtures
- API client with repository and image storage dependency overrides
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

import food_registration.models  # noqa: F401  (registers tables on SQLModel.metadata)
from food_registration.core.security import create_access_token
from food_registration.domain.producer_repository import ProducerRepository
from food_registration.domain.product_repository import ProductRepository
from food_registration.services.image_storage import ImageStorage

OWNER_EMAIL = "test@test.com"
OTHER_EMAIL = "someone.else@test.com"


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "integration: DB integration tests (in-memory SQLite)")


# ─────────────────────────────────────────────────────────────────────────────
# Database
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
async def db_session():
    """A session on a fresh in-memory SQLite database, discarded after the test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    session = AsyncSession(engine, expire_on_commit=False)
    try:
        yield session
    finally:
        await session.close()
        await engine.dispose()


# ─────────────────────────────────────────────────────────────────────────────
# API Client
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def product_repo() -> AsyncMock:
    return AsyncMock(spec=ProductRepository)


@pytest.fixture
def producer_repo() -> AsyncMock:
    return AsyncMock(spec=ProducerRepository)


@pytest.fixture
def image_storage(tmp_path) -> ImageStorage:
    return ImageStorage(web_root=tmp_path, images_dir="images", allowed_extensions=[".jpg", ".png"])


@pytest.fixture
async def api_client(product_repo, producer_repo, image_storage):
    """HTTP client authenticated as OWNER_EMAIL, with repositories mocked.

    Overrides: get_product_repository, get_producer_repository, get_image_storage
    """
    from food_registration.api.deps import get_producer_repository, get_product_repository
    from food_registration.main import app
    from food_registration.services.image_storage import get_image_storage

    app.dependency_overrides[get_product_repository] = lambda: product_repo
    app.dependency_overrides[get_producer_repository] = lambda: producer_repo
    app.dependency_overrides[get_image_storage] = lambda: image_storage

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        cookies={"access_token": create_access_token(OWNER_EMAIL)},
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def anonymous_client(product_repo, producer_repo, image_storage):
    """HTTP client without a token."""
    from food_registration.api.deps import get_producer_repository, get_product_repository
    from food_registration.main import app
    from food_registration.services.image_storage import get_image_storage

    app.dependency_overrides[get_product_repository] = lambda: product_repo
    app.dependency_overrides[get_producer_repository] = lambda: producer_repo
    app.dependency_overrides[get_image_storage] = lambda: image_storage

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()

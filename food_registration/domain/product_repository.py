from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from food_registration.domain.base_repository import BaseRepository
from food_registration.models.producer import Producer
from food_registration.models.product import Product


class ProductRepository(BaseRepository[Product]):
    """CRUD operations for Product model."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Product, "product_id")

    async def get_all_products(self) -> list[Product]:
        """Get every product, with its producer, ordered by name."""
        statement = (
            select(Product)
            .options(selectinload(Product.producer))  # type: ignore[arg-type]
            .order_by(Product.name)
        )
        result = await self.db.execute(statement)
        return list(result.scalars().all())

    async def get_product_by_id(self, product_id: int) -> Product | None:
        """Get a product with its producer loaded."""
        statement = (
            select(Product)
            .where(Product.product_id == product_id)  # type: ignore[arg-type]
            .options(selectinload(Product.producer))  # type: ignore[arg-type]
        )
        result = await self.db.execute(statement)
        return result.scalar_one_or_none()

    async def get_filtered_products(
        self,
        name: str | None = None,
        category: str | None = None,
    ) -> list[Product]:
        """Filter products by name substring (case-insensitive) and exact category.

        Empty filters are ignored, so calling with neither returns every product.
        """
        statement = select(Product).options(
            selectinload(Product.producer)  # type: ignore[arg-type]
        )
        if name and name.strip():
            # % and _ in the search text match literally
            statement = statement.where(
                func.lower(Product.name).contains(name.strip().lower(), autoescape=True)
            )
        if category and category.strip():
            statement = statement.where(Product.category == category.strip())  # type: ignore[arg-type]
        statement = statement.order_by(Product.name)
        result = await self.db.execute(statement)
        return list(result.scalars().all())

    async def get_products_by_owner(self, owner_id: str) -> list[Product]:
        """Get all products whose producer is owned by the given user."""
        statement = (
            select(Product)
            .join(Producer, Product.producer_id == Producer.producer_id)  # type: ignore[arg-type]
            .where(Producer.owner_id == owner_id)  # type: ignore[arg-type]
            .options(selectinload(Product.producer))  # type: ignore[arg-type]
            .order_by(Product.name)
        )
        result = await self.db.execute(statement)
        return list(result.scalars().all())

    async def count_by_producer(self, producer_id: int) -> int:
        """Count the products registered under a producer."""
        statement = select(func.count()).where(Product.producer_id == producer_id)  # type: ignore[arg-type]
        result = await self.db.execute(statement)
        return result.scalar() or 0

    async def create_product(self, product: Product) -> Product:
        return await self.add(product)

    async def update_product(self, product: Product) -> Product:
        return await self.update(product)

    async def delete_product(self, product_id: int) -> bool:
        return await self.delete(product_id)

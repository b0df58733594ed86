from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from food_registration.domain.base_repository import BaseRepository
from food_registration.models.producer import Producer


class ProducerRepository(BaseRepository[Producer]):
    """CRUD operations for Producer model."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Producer, "producer_id")

    async def get_all_producers(self) -> list[Producer]:
        """Get every producer ordered by name."""
        statement = select(Producer).order_by(Producer.name)
        result = await self.db.execute(statement)
        return list(result.scalars().all())

    async def get_producer_by_id(self, producer_id: int) -> Producer | None:
        return await self.get(producer_id)

    async def get_producers_by_owner(self, owner_id: str) -> list[Producer]:
        """Get the producers managed by a user."""
        statement = (
            select(Producer)
            .where(Producer.owner_id == owner_id)  # type: ignore[arg-type]
            .order_by(Producer.name)
        )
        result = await self.db.execute(statement)
        return list(result.scalars().all())

    async def create_producer(self, producer: Producer) -> Producer:
        return await self.add(producer)

    async def update_producer(self, producer: Producer) -> Producer:
        return await self.update(producer)

    async def delete_producer(self, producer_id: int) -> bool:
        return await self.delete(producer_id)

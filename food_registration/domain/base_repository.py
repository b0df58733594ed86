from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base CRUD operations for all models, bound to one database session."""

    def __init__(self, db: AsyncSession, model: type[ModelType], pk_field: str):
        self.db = db
        self.model = model
        self.pk_field = pk_field

    @property
    def _pk(self) -> Any:
        return getattr(self.model, self.pk_field)

    async def get(self, id: int) -> ModelType | None:
        """Get a single record by primary key."""
        statement = select(self.model).where(self._pk == id)
        result = await self.db.execute(statement)
        return result.scalar_one_or_none()

    async def get_multi(self, skip: int = 0, limit: int = 100) -> list[ModelType]:
        """Get multiple records with pagination."""
        statement = select(self.model).offset(skip).limit(limit).order_by(self._pk)
        result = await self.db.execute(statement)
        return list(result.scalars().all())

    async def add(self, db_obj: ModelType) -> ModelType:
        """Persist a new record and return it with its generated key."""
        self.db.add(db_obj)
        await self.db.flush()
        await self.db.refresh(db_obj)
        return db_obj

    async def update(self, db_obj: ModelType, obj_in: dict | None = None) -> ModelType:
        """Update an existing record.

        All keys in obj_in are applied, including None values.
        Callers should use model_dump(exclude_unset=True) to omit
        fields that were not explicitly provided.
        """
        for field, value in (obj_in or {}).items():
            setattr(db_obj, field, value)
        if hasattr(db_obj, "updated_at"):
            db_obj.updated_at = datetime.now(UTC)  # type: ignore[attr-defined]
        self.db.add(db_obj)
        await self.db.flush()
        await self.db.refresh(db_obj)
        return db_obj

    async def delete(self, id: int) -> bool:
        """Delete a record by primary key. Returns False if it did not exist."""
        db_obj = await self.get(id)
        if db_obj:
            await self.db.delete(db_obj)
            await self.db.flush()
            return True
        return False

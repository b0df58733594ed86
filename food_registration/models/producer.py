from typing import TYPE_CHECKING, Optional

from pydantic import field_validator
from sqlmodel import Field, Relationship, SQLModel

from food_registration.models.base import TimestampMixin, blank_to_none

if TYPE_CHECKING:
    from food_registration.models.product import Product


class ProducerBase(SQLModel):
    """Base fields shared across Producer schemas."""

    name: str = Field(max_length=100, index=True)
    description: str | None = Field(default=None, max_length=500)
    address: str | None = Field(default=None, max_length=200)


class ProducerForm(SQLModel):
    """Schema for the producer create/update form."""

    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    address: str | None = Field(default=None, max_length=200)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("description", "address", mode="before")
    @classmethod
    def empty_as_none(cls, value: object) -> object:
        return blank_to_none(value)


class Producer(ProducerBase, TimestampMixin, table=True):
    """A food producer, managed by the user whose email is owner_id."""

    __tablename__ = "producers"

    producer_id: int | None = Field(default=None, primary_key=True)
    image_url: str | None = Field(default=None, max_length=300)
    owner_id: str = Field(
        max_length=255,
        index=True,
        sa_column_kwargs={"comment": "Email of the user who manages this producer"},
    )

    products: list["Product"] = Relationship(back_populates="producer")

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        """Check whether the given user identifier owns this producer."""
        return bool(user_id) and self.owner_id == user_id

from typing import TYPE_CHECKING, Optional

from pydantic import field_validator
from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field, Relationship, SQLModel

from food_registration.models.base import TimestampMixin, blank_to_none

if TYPE_CHECKING:
    from food_registration.models.producer import Producer


PRODUCT_CATEGORIES: tuple[str, ...] = (
    "Fruits",
    "Vegetables",
    "Dairy",
    "Meat",
    "Fish",
    "Bakery",
    "Grains",
    "Beverages",
    "Snacks",
    "Other",
)

NUTRITION_SCORES: tuple[str, ...] = ("A", "B", "C", "D", "E")


class ProductBase(SQLModel):
    """Base fields shared across Product schemas."""

    name: str = Field(max_length=100, index=True)
    description: str | None = Field(default=None, max_length=500)
    category: str | None = Field(default=None, max_length=50, index=True)
    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    carbohydrates: float | None = Field(default=None, ge=0)
    nutrition_score: str | None = Field(default=None, max_length=1)


class ProductForm(ProductBase):
    """Schema for the product create/update form.

    Validation failures are surfaced to the user as per-field errors.
    """

    name: str = Field(min_length=1, max_length=100)
    producer_id: int

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator(
        "description",
        "category",
        "calories",
        "protein",
        "fat",
        "carbohydrates",
        "nutrition_score",
        mode="before",
    )
    @classmethod
    def empty_as_none(cls, value: object) -> object:
        return blank_to_none(value)

    @field_validator("producer_id", mode="before")
    @classmethod
    def producer_required(cls, value: object) -> object:
        if blank_to_none(value) is None:
            raise ValueError("Producer is required")
        return value

    @field_validator("category")
    @classmethod
    def known_category(cls, value: str | None) -> str | None:
        if value is not None and value not in PRODUCT_CATEGORIES:
            raise ValueError(f"Unknown category '{value}'")
        return value

    @field_validator("nutrition_score")
    @classmethod
    def known_score(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.upper()
        if value not in NUTRITION_SCORES:
            raise ValueError("Nutrition score must be one of A, B, C, D, E")
        return value


class Product(ProductBase, TimestampMixin, table=True):
    """A food item registered under a producer."""

    __tablename__ = "products"

    product_id: int | None = Field(default=None, primary_key=True)
    image_url: str | None = Field(default=None, max_length=300)

    producer_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("producers.producer_id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
    )

    producer: Optional["Producer"] = Relationship(back_populates="products")

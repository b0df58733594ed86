"""create_producers_and_products

Revision ID: 4b1c2e7d9a10
Revises:
Create Date: 2026-10-18 10:12:41.220417

Initial schema: producers owned by a user (email) and the products
registered under them.
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4b1c2e7d9a10"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "producers",
        sa.Column("producer_id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("address", sa.String(length=200), nullable=True),
        sa.Column("image_url", sa.String(length=300), nullable=True),
        sa.Column(
            "owner_id",
            sa.String(length=255),
            nullable=False,
            comment="Email of the user who manages this producer",
        ),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    )
    op.create_index("ix_producers_name", "producers", ["name"])
    op.create_index("ix_producers_owner_id", "producers", ["owner_id"])

    op.create_table(
        "products",
        sa.Column("product_id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("category", sa.String(length=50), nullable=True),
        sa.Column("calories", sa.Float(), nullable=True),
        sa.Column("protein", sa.Float(), nullable=True),
        sa.Column("fat", sa.Float(), nullable=True),
        sa.Column("carbohydrates", sa.Float(), nullable=True),
        sa.Column("nutrition_score", sa.String(length=1), nullable=True),
        sa.Column("image_url", sa.String(length=300), nullable=True),
        sa.Column(
            "producer_id",
            sa.Integer(),
            sa.ForeignKey("producers.producer_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    )
    op.create_index("ix_products_name", "products", ["name"])
    op.create_index("ix_products_category", "products", ["category"])
    op.create_index("ix_products_producer_id", "products", ["producer_id"])


def downgrade() -> None:
    op.drop_index("ix_products_producer_id", table_name="products")
    op.drop_index("ix_products_category", table_name="products")
    op.drop_index("ix_products_name", table_name="products")
    op.drop_table("products")
    op.drop_index("ix_producers_owner_id", table_name="producers")
    op.drop_index("ix_producers_name", table_name="producers")
    op.drop_table("producers")

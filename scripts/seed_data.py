"""Seed a development database with sample producers and products.

Usage:
    python -m scripts.seed_data owner@example.com

This script:
1. Creates the tables if they do not exist
2. Adds two producers owned by the given email (skipped if it already owns any)
3. Adds a handful of products under them
4. Prints a signed access token for that email, for use as the
   ``access_token`` cookie or a bearer header
"""

from __future__ import annotations

import asyncio
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)

SAMPLE_DATA = {
    "Green Valley Farm": {
        "address": "Fjellveien 12, Oslo",
        "products": [
            ("Apple", "Fruits", 52, "A"),
            ("Orange", "Fruits", 47, "A"),
            ("Carrot", "Vegetables", 41, "A"),
        ],
    },
    "Nordic Dairy": {
        "address": "Melkeveien 3, Bergen",
        "products": [
            ("Whole Milk", "Dairy", 64, "B"),
            ("Brown Cheese", "Dairy", 465, "D"),
        ],
    },
}


async def seed(owner_email: str) -> None:
    """Insert the sample producers and products for one owner."""
    from food_registration.core.database import async_session_maker, engine, init_db
    from food_registration.core.security import create_access_token
    from food_registration.domain.producer_repository import ProducerRepository
    from food_registration.domain.product_repository import ProductRepository
    from food_registration.models import Producer, Product

    await init_db()

    async with async_session_maker() as db:
        producers = ProducerRepository(db)
        products = ProductRepository(db)

        existing = await producers.get_producers_by_owner(owner_email)
        if existing:
            logger.info(f"{owner_email} already owns {len(existing)} producers. Skipping seed.")
        else:
            for producer_name, data in SAMPLE_DATA.items():
                producer = await producers.create_producer(
                    Producer(name=producer_name, address=data["address"], owner_id=owner_email)
                )
                for name, category, calories, score in data["products"]:
                    await products.create_product(
                        Product(
                            name=name,
                            category=category,
                            calories=calories,
                            nutrition_score=score,
                            producer_id=producer.producer_id,
                        )
                    )
                logger.info(f"Seeded {producer_name} with {len(data['products'])} products")
            await db.commit()

    await engine.dispose()
    logger.info(f"Access token for {owner_email}:\n{create_access_token(owner_email)}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        logger.error("Usage: python -m scripts.seed_data <owner-email>")
        sys.exit(1)
    asyncio.run(seed(sys.argv[1]))

"""
Seed a handful of products for the direct-persistence backend.

Run locally:
  INVENTORY_BACKEND=database python backend/scripts/seed_products.py

Uses the same DATABASE_* env vars as the backend. Idempotent: products are
matched by name (case-insensitive) and skipped when already present.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List

from sqlalchemy import func, select

from core.config import settings
from db.database import Database
from db.product import Product


SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "name": "Hazy Daze IPA",
        "type": "Beer",
        "description": "Juicy New England IPA",
        "abv": 6.5,
        "volume": 473,
        "package": "Can",
        "price": 4.5,
        "cost": 1.8,
        "stock_quantity": 120,
        "reorder_point": 40,
        "taste_profile": {"primaryFlavor": "Citrus", "sweetness": "Low", "bitterness": "Medium"},
    },
    {
        "name": "Stout Heart",
        "type": "Beer",
        "description": "Oatmeal stout with coffee notes",
        "abv": 5.8,
        "volume": 355,
        "package": "Bottle",
        "price": 5.0,
        "cost": 2.1,
        "stock_quantity": 30,
        "reorder_point": 30,
        "taste_profile": {"primaryFlavor": "Roast", "sweetness": "Medium", "bitterness": "Medium"},
    },
    {
        "name": "Paloma Fizz",
        "type": "Hard Seltzer",
        "description": "Grapefruit and lime seltzer",
        "abv": 4.5,
        "volume": 355,
        "package": "Can",
        "price": 3.5,
        "cost": 1.2,
        "stock_quantity": 200,
        "reorder_point": 50,
        "taste_profile": {"primaryFlavor": "Grapefruit", "sweetness": "Low", "bitterness": None},
    },
]


async def seed(database: Database) -> int:
    """Insert missing seed products, returns how many were created."""
    await database.create_tables()
    created = 0
    async with database.session_maker() as db:
        for data in SEED_PRODUCTS:
            existing = await db.execute(
                select(Product).where(func.lower(Product.name) == data["name"].lower())
            )
            if existing.scalar_one_or_none():
                continue
            db.add(Product(**data))
            created += 1
        await db.commit()
    return created


async def main() -> None:
    database = Database(settings.database_url, echo=settings.database_echo)
    try:
        created = await seed(database)
        print(f"Seeded {created} product(s)")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())

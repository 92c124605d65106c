#!/usr/bin/env python3
"""Seed products script.

Creates the products table if needed and inserts deterministic
sample products.

Usage:
    python scripts/seed_products.py --count 50
    python scripts/seed_products.py --count 200 --seed 7
"""

import argparse
import asyncio

from products_service.catalog.repository import ProductRepository
from products_service.catalog.seed import SeedConfig, generate_sample_products
from products_service.catalog.service import ProductCatalogService
from products_service.infrastructure.config import settings
from products_service.infrastructure.database import Database


async def seed(config: SeedConfig) -> int:
    """Insert sample products.

    Args:
        config: Generation settings.

    Returns:
        Number of products created.
    """
    database = Database(settings.database_url, echo=settings.debug)
    await database.connect(create_tables=True)

    try:
        async with database.session_factory() as session:
            service = ProductCatalogService(ProductRepository(session))
            for data in generate_sample_products(config):
                await service.create(data)
            await session.commit()
    finally:
        await database.disconnect()

    return config.count


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog with sample products",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=50,
        help="Number of products to create (default: 50)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducible names and prices",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Products Seeder")
    print("=" * 60)
    print(f"Database: {settings.database_url}")
    print(f"Count: {args.count}")
    print()

    created = await seed(SeedConfig(count=args.count, seed=args.seed))

    print(f"  ✓ Created: {created} products")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())

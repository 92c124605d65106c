"""Deterministic sample product generation.

Used by ``scripts/seed_products.py`` to fill a development database.
"""

import random
from dataclasses import dataclass

from products_service.catalog.service import ProductCreate

ADJECTIVES = [
    "Compact",
    "Deluxe",
    "Ergonomic",
    "Heavy-Duty",
    "Portable",
    "Premium",
    "Rustic",
    "Sleek",
    "Smart",
    "Wireless",
]

NOUNS = [
    "Backpack",
    "Blender",
    "Desk Lamp",
    "Headphones",
    "Keyboard",
    "Mug",
    "Notebook",
    "Speaker",
    "Water Bottle",
    "Widget",
]


@dataclass
class SeedConfig:
    """Configuration for sample generation.

    Attributes:
        count: Number of products to generate.
        seed: Random seed for reproducible output.
        min_price: Lowest price generated.
        max_price: Highest price generated.
    """

    count: int = 50
    seed: int = 42
    min_price: float = 1.0
    max_price: float = 500.0


def generate_sample_products(config: SeedConfig | None = None) -> list[ProductCreate]:
    """Generate sample product inputs.

    The same config always yields the same products.

    Args:
        config: Generation settings.

    Returns:
        List of product inputs.
    """
    config = config or SeedConfig()
    rng = random.Random(config.seed)

    products = []
    for _ in range(config.count):
        name = f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)}"
        price = round(rng.uniform(config.min_price, config.max_price), 2)
        products.append(ProductCreate(name=name, price=price))
    return products

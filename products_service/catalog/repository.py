"""Product repository for database operations.

Provides the persistence, counting and slicing the catalog service relies on.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from products_service.catalog.models import Product


class ProductRepository:
    """Repository for Product database operations.

    Reads that back findOne/update/remove only see available products;
    the batch lookup deliberately ignores availability.

    Example usage:
        async with database.session_factory() as session:
            repo = ProductRepository(session)
            products = await repo.find_available(limit=10, offset=0)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, product: Product) -> Product:
        """Save a product to database.

        Args:
            product: Product to save.

        Returns:
            Saved product with its store-assigned id.
        """
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def get_by_id(
        self,
        product_id: int,
        available_only: bool = True,
    ) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.
            available_only: Ignore soft-deleted products.

        Returns:
            Product if found, None otherwise.
        """
        query = select(Product).where(Product.id == product_id)

        if available_only:
            query = query.where(Product.available.is_(True))

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_available(self, limit: int, offset: int = 0) -> Sequence[Product]:
        """Get a slice of available products in insertion order.

        Args:
            limit: Maximum results.
            offset: Number of products to skip.

        Returns:
            Sequence of products.
        """
        query = (
            select(Product)
            .where(Product.available.is_(True))
            .order_by(Product.id.asc())
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(query)
        return result.scalars().all()

    async def count_available(self) -> int:
        """Count available products.

        Returns:
            Number of products with ``available = true``.
        """
        query = select(func.count(Product.id)).where(Product.available.is_(True))

        result = await self.session.execute(query)
        return result.scalar_one()

    async def find_by_ids(self, product_ids: Iterable[int]) -> Sequence[Product]:
        """Get all products with the given ids, available or not.

        Args:
            product_ids: Product IDs.

        Returns:
            Matching products ordered by id.
        """
        ids = list(product_ids)
        if not ids:
            return []

        query = select(Product).where(Product.id.in_(ids)).order_by(Product.id.asc())

        result = await self.session.execute(query)
        return result.scalars().all()

    async def update_available(
        self,
        product_id: int,
        values: dict[str, Any],
    ) -> Product | None:
        """Update an available product in a single statement.

        The availability check and the write happen in one
        ``UPDATE ... WHERE available RETURNING`` so a concurrent removal
        cannot slip in between them.

        Args:
            product_id: Product ID.
            values: Column values to set.

        Returns:
            The updated product, or None if no available product matched.
        """
        stmt = (
            update(Product)
            .where(Product.id == product_id, Product.available.is_(True))
            .values(**values)
            .returning(Product)
            .execution_options(synchronize_session=False, populate_existing=True)
        )

        result = await self.session.execute(stmt)
        return result.scalars().first()

"""
Base repository class with common CRUD operations.
Repositories handle database access using async SQLAlchemy sessions.
Nothing here commits; transactions belong to the caller (see UnitOfWork).
"""

from typing import Any, Dict, Generic, TypeVar, Type, Optional, List, Sequence, Set
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete

from resource_manager.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations."""

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    async def create(self, **kwargs) -> ModelType:
        """
        Create a new record.

        Args:
            **kwargs: Model attributes

        Returns:
            Created model instance
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def create_many(self, rows: Sequence[Dict[str, Any]]) -> List[ModelType]:
        """
        Create several records in one flush.

        Args:
            rows: Attribute dicts, one per record

        Returns:
            Created model instances in input order
        """
        instances = [self.model(**row) for row in rows]
        self.session.add_all(instances)
        await self.session.flush()
        for instance in instances:
            await self.session.refresh(instance)
        return instances

    async def get(self, id: int) -> Optional[ModelType]:
        """
        Get a record by ID.

        Args:
            id: Record ID

        Returns:
            Model instance or None
        """
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def exists(self, id: int) -> bool:
        """Check whether a record with this ID exists."""
        result = await self.session.execute(
            select(self.model.id).where(self.model.id == id)
        )
        return result.scalar_one_or_none() is not None

    async def existing_ids(self, ids: Sequence[int]) -> Set[int]:
        """Return the subset of ``ids`` that exist."""
        if not ids:
            return set()
        result = await self.session.execute(
            select(self.model.id).where(self.model.id.in_(set(ids)))
        )
        return set(result.scalars().all())

    async def list(
        self,
        skip: int = 0,
        limit: Optional[int] = 100,
        **filters,
    ) -> List[ModelType]:
        """
        List records with pagination and filters.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return, None for all
            **filters: Filter criteria

        Returns:
            List of model instances
        """
        query = select(self.model)

        # Apply filters
        for key, value in filters.items():
            if hasattr(self.model, key):
                query = query.where(getattr(self.model, key) == value)

        query = query.order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update(self, id: int, **kwargs) -> Optional[ModelType]:
        """
        Update a record.

        Args:
            id: Record ID
            **kwargs: Attributes to update

        Returns:
            Updated model instance or None
        """
        await self.session.execute(
            update(self.model)
            .where(self.model.id == id)
            .values(**kwargs)
        )
        await self.session.flush()
        return await self.get(id)

    async def delete(self, id: int) -> bool:
        """
        Delete a record.

        Args:
            id: Record ID

        Returns:
            True if deleted, False if not found
        """
        result = await self.session.execute(
            delete(self.model).where(self.model.id == id)
        )
        await self.session.flush()
        return result.rowcount > 0

    async def delete_many(self, **filters) -> int:
        """
        Delete every record matching the filters.

        Returns:
            Number of deleted rows
        """
        if not filters:
            raise ValueError("delete_many requires at least one filter")
        query = delete(self.model)
        for key, value in filters.items():
            query = query.where(getattr(self.model, key) == value)
        result = await self.session.execute(query)
        await self.session.flush()
        return result.rowcount

"""
Base service class.
Services contain business logic and coordinate repositories.
"""

from abc import ABC

from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.db.unit_of_work import UnitOfWork


class BaseService(ABC):
    """Base class for services bound to one database session."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.unit_of_work = UnitOfWork(session)

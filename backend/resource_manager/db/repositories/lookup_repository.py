"""
Repositories for the role, skill and project type lookups.
"""

from typing import List, Type, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from resource_manager.db.repositories.base_repository import BaseRepository
from resource_manager.models.role import ProjectType, Role, Skill

LookupModel = Union[Role, Skill, ProjectType]


class LookupRepository(BaseRepository[LookupModel]):
    """Repository for name-only lookup tables."""

    def __init__(self, model: Type[LookupModel], session: AsyncSession):
        super().__init__(model, session)

    async def list_by_name(self) -> List[LookupModel]:
        """List every entry sorted by name."""
        result = await self.session.execute(select(self.model).order_by(self.model.name))
        return list(result.scalars().all())

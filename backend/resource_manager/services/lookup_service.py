"""
Lookup service for roles, skills and project types.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.db.repositories.lookup_repository import LookupRepository
from resource_manager.models.role import ProjectType, Role, Skill
from resource_manager.schemas.lookup import LookupResponse
from resource_manager.services.base_service import BaseService


class LookupService(BaseService):
    """Read-only access to the label lookups."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.role_repo = LookupRepository(Role, session)
        self.skill_repo = LookupRepository(Skill, session)
        self.type_repo = LookupRepository(ProjectType, session)

    async def list_roles(self) -> List[LookupResponse]:
        return [LookupResponse.model_validate(r) for r in await self.role_repo.list_by_name()]

    async def list_skills(self) -> List[LookupResponse]:
        return [LookupResponse.model_validate(s) for s in await self.skill_repo.list_by_name()]

    async def list_types(self) -> List[LookupResponse]:
        return [LookupResponse.model_validate(t) for t in await self.type_repo.list_by_name()]

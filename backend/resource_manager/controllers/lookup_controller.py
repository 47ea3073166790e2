"""
Lookup controller.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.controllers.base_controller import BaseController
from resource_manager.services.lookup_service import LookupService
from resource_manager.schemas.lookup import LookupResponse


class LookupController(BaseController):
    """Controller for role, skill and project type lookups."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.lookup_service = LookupService(session)

    async def list_roles(self) -> List[LookupResponse]:
        return await self.lookup_service.list_roles()

    async def list_skills(self) -> List[LookupResponse]:
        return await self.lookup_service.list_skills()

    async def list_types(self) -> List[LookupResponse]:
        return await self.lookup_service.list_types()
